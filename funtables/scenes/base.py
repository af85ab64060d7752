"""Scene base class and utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

import pygame

from .. import settings
from ..scheduler import Scheduler

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from ..app import App


class Scene:
    """Base class for all scenes."""

    def __init__(self, app: "App") -> None:
        self.app = app
        self.scheduler = Scheduler()

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """React to incoming events. Child classes override as needed."""

    def update(self, delta_time: float) -> None:
        """Advance timed transitions. Child classes extend as needed."""

        self.scheduler.update(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        raise NotImplementedError

    @property
    def elapsed(self) -> float:
        return self.scheduler.elapsed

    # Utility helpers -------------------------------------------------
    @staticmethod
    def draw_vertical_gradient(surface: pygame.Surface, colors: Sequence[tuple[int, int, int]]) -> None:
        """Draw a vertical gradient through ``colors`` as the background."""

        height = surface.get_height()
        width = surface.get_width()
        stops = max(len(colors) - 1, 1)
        for y in range(height):
            position = y / max(height - 1, 1) * stops
            index = min(int(position), stops - 1)
            ratio = position - index
            top_color = colors[index]
            bottom_color = colors[min(index + 1, len(colors) - 1)]
            color = tuple(
                int(top_color[i] + (bottom_color[i] - top_color[i]) * ratio)
                for i in range(3)
            )
            pygame.draw.line(surface, color, (0, y), (width, y))

    @staticmethod
    def draw_background(surface: pygame.Surface) -> None:
        Scene.draw_vertical_gradient(
            surface,
            (settings.GRADIENT_TOP, settings.GRADIENT_MIDDLE, settings.GRADIENT_MIDDLE, settings.GRADIENT_BOTTOM),
        )

    @staticmethod
    def draw_card(surface: pygame.Surface, rect: pygame.Rect, radius: int = 20) -> None:
        shadow = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(shadow, (*settings.COLOR_SHADOW, 70), shadow.get_rect(), border_radius=radius)
        surface.blit(shadow, rect.move(0, 3).topleft)
        pygame.draw.rect(surface, settings.COLOR_CARD, rect, border_radius=radius)

    @staticmethod
    def ease_out(progress: float) -> float:
        progress = max(0.0, min(1.0, progress))
        return 1 - (1 - progress) ** 3


__all__ = ["Scene"]
