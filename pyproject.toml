[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prayengine"
version = "0.1.0"
description = "A small entity-component-system 2D game engine built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "ecs", "entity component system", "2d", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
prayengine = "prayengine.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["prayengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
