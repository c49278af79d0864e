"""A small entity-component-system 2D game engine built on pygame."""

__version__ = "0.1.0"