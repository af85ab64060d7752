"""Main application loop for the times tables game."""

from __future__ import annotations

import logging
from typing import Type

import pygame

from . import settings
from .scenes.base import Scene
from .scenes.settings_scene import SettingsScene

logger = logging.getLogger(__name__)


class App:
    """Owns the window, the main loop and the current scene."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(settings.SCREEN_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption("Fun × Tables")
        self.clock = pygame.time.Clock()
        self.running = True

        self._scene: Scene = SettingsScene(self)
        logger.info("Scene: %s", type(self._scene).__name__)

    @property
    def scene(self) -> Scene:
        return self._scene

    def change_scene(self, new_scene_cls: Type[Scene], **kwargs: object) -> None:
        """Replace the active scene with a new one."""

        self._scene = new_scene_cls(self, **kwargs)
        logger.info("Scene: %s", new_scene_cls.__name__)

    def run(self) -> None:
        """Main loop of the application."""

        while self.running:
            dt = self.clock.tick(settings.FPS) / 1000.0
            events = pygame.event.get()

            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False

            self._scene.handle_events(events)
            self._scene.update(dt)
            self._scene.render(self.screen)
            pygame.display.flip()

        pygame.quit()


__all__ = ["App"]
