"""The engine: window, main loop and the registries a game works with."""

from __future__ import annotations

import argparse
from typing import Optional

import pygame

from prayengine.camera import get_camera
from prayengine.component import ComponentRegistry
from prayengine.default_components import register_default_components
from prayengine.default_systems import register_default_systems
from prayengine.entity_registry import EntityRegistry
from prayengine.system import SystemList
from prayengine.tmem import MemoryTracker

SCREEN_WIDTH = 1500
SCREEN_HEIGHT = 1500
WINDOW_TITLE = "In the Name of Science!"
TARGET_FPS = 60

DARK_GRAY = (80, 80, 80, 255)
MATERIAL_BLUE_GREY_800 = (55, 71, 79, 255)
MATERIAL_BLUE_GREY_700 = (69, 90, 100, 255)
MATERIAL_BLUE_GREY_100 = (207, 216, 220, 255)
MATERIAL_BLUE_GREY_200 = (176, 190, 197, 255)


class Engine:
    """Owns the window and runs every registered system once per frame."""

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        title: str = WINDOW_TITLE,
        fps: int = TARGET_FPS,
    ):
        self.width = width
        self.height = height
        self.title = title
        self.fps = fps
        self.memory = MemoryTracker()
        self.components = ComponentRegistry()
        self.systems = SystemList()
        self.entities = EntityRegistry()
        self.camera = get_camera()
        self._window: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None

    def initialize(self) -> None:
        """Reset the registries and open a resizable window."""
        self.memory.reset()
        self.systems.clear()
        self.entities.destroy()
        pygame.display.init()
        self._window = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(self.title)
        self._clock = pygame.time.Clock()

    def surface(self) -> pygame.Surface:
        """Return the window surface; raise RuntimeError if no window is open."""
        if self._window is None:
            raise RuntimeError("engine window is not open")
        return pygame.display.get_surface()

    def _should_close(self) -> bool:
        close = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                close = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                close = True
            elif event.type == pygame.VIDEORESIZE and (
                event.w < self.width or event.h < self.height
            ):
                self._window = pygame.display.set_mode(
                    (max(event.w, self.width), max(event.h, self.height)), pygame.RESIZABLE
                )
        return close

    def _close_window(self) -> None:
        if self._window is not None:
            pygame.display.quit()
            self._window = None
            self._clock = None

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run the main loop until the window closes or ``max_frames`` pass.

        Closes the window afterwards and returns the number of frames run.
        """
        if self._window is None:
            raise RuntimeError("engine is not initialized")
        self.systems.run_start()
        frames = 0
        while (max_frames is None or frames < max_frames) and not self._should_close():
            self.systems.run_game_update()
            self.surface().fill(DARK_GRAY)
            self.systems.run_render_world_space()
            self.systems.run_render_screen_space()
            pygame.display.flip()
            self._clock.tick(self.fps)
            frames += 1
        self.systems.run_stop()
        self._close_window()
        return frames

    def destroy(self) -> None:
        """Free every entity, drop every system and close any open window."""
        self.entities.destroy()
        self.systems.clear()
        self._close_window()


def main(argv=None) -> int:
    """Open the engine window with the default components and systems."""
    parser = argparse.ArgumentParser(prog="prayengine", description="Run the engine window.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--title", default=WINDOW_TITLE)
    parser.add_argument("--fps", type=int, default=TARGET_FPS)
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    engine = Engine(args.width, args.height, args.title, args.fps)
    engine.initialize()
    register_default_components(engine.components)
    register_default_systems(engine.systems, engine.entities, engine.surface, engine.camera)
    try:
        engine.run(args.frames)
    finally:
        engine.destroy()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())