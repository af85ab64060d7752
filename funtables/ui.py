"""UI drawing helpers: glossy buttons, keypad keys, picker and slider."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

import pygame

from . import settings

Palette = Dict[str, tuple[int, int, int]]

WHITE_PALETTE: Palette = {
    "top": (255, 255, 255),
    "bottom": (240, 240, 246),
    "border": (255, 255, 255),
    "shadow": (90, 90, 140),
}
PURPLE_PALETTE: Palette = {
    "top": (160, 90, 210),
    "bottom": (128, 50, 180),
    "border": (128, 50, 180),
    "shadow": (70, 25, 100),
}


def _blend(color_a: tuple[int, int, int], color_b: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    factor = max(0.0, min(1.0, factor))
    return tuple(int(color_a[i] + (color_b[i] - color_a[i]) * factor) for i in range(3))


def _darken(color: tuple[int, int, int], amount: float) -> tuple[int, int, int]:
    return _blend(color, (0, 0, 0), amount)


_STATE_OFFSETS = {
    "rest": {"base": 6, "face": -3},
    "hover": {"base": 4, "face": -1},
    "pressed": {"base": 2, "face": 1},
}


def draw_glossy_button(
    surface: pygame.Surface,
    rect: pygame.Rect,
    palette: Palette,
    *,
    selected: bool = False,
    hover: bool = False,
    corner_radius: int | None = None,
) -> pygame.Rect:
    """Render a rounded button with a soft drop shadow and return the face rect."""

    state = "pressed" if selected else "hover" if hover else "rest"
    offsets = _STATE_OFFSETS[state]

    radius = corner_radius if corner_radius is not None else rect.height // 2
    radius = max(8, min(radius, rect.width // 2))

    base_rect = rect.inflate(-8, -4).move(0, offsets["base"])
    base_surface = pygame.Surface(base_rect.size, pygame.SRCALPHA)
    pygame.draw.rect(
        base_surface,
        (*_darken(palette["shadow"], 0.2), 110),
        base_surface.get_rect(),
        border_radius=radius,
    )
    surface.blit(base_surface, base_rect.topleft)

    face_rect = rect.inflate(-6, -6).move(0, offsets["face"])
    face_surface = pygame.Surface(face_rect.size, pygame.SRCALPHA)
    for y in range(face_surface.get_height()):
        ratio = y / max(face_surface.get_height() - 1, 1)
        color = _blend(palette["top"], palette["bottom"], ratio)
        pygame.draw.line(face_surface, color, (0, y), (face_surface.get_width(), y))

    mask = pygame.Surface(face_rect.size, pygame.SRCALPHA)
    pygame.draw.rect(mask, (255, 255, 255, 255), mask.get_rect(), border_radius=radius)
    face_surface.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)

    surface.blit(face_surface, face_rect.topleft)

    return face_rect


class Button:
    """Interactive button built on top of the glossy button helper."""

    def __init__(
        self,
        rect: pygame.Rect,
        label: str,
        font: pygame.font.Font,
        palette: Palette,
        *,
        text_color: tuple[int, int, int] = (255, 255, 255),
        callback: Optional[Callable[[], None]] = None,
        corner_radius: int | None = None,
    ) -> None:
        self.rect = rect
        self.label = label
        self.font = font
        self.palette = palette
        self.text_color = text_color
        self.corner_radius = corner_radius
        self.disabled = False
        self._callback = callback

    def set_rect(self, rect: pygame.Rect) -> None:
        self.rect = rect

    def label_color(self) -> tuple[int, int, int]:
        return settings.COLOR_DISABLED if self.disabled else self.text_color

    def render(
        self,
        surface: pygame.Surface,
        *,
        hover: bool = False,
        selected: bool = False,
    ) -> pygame.Rect:
        face_rect = draw_glossy_button(
            surface,
            self.rect,
            self.palette,
            selected=selected,
            hover=hover and not self.disabled,
            corner_radius=self.corner_radius,
        )
        text_surface = self.font.render(self.label, True, self.label_color())
        surface.blit(text_surface, text_surface.get_rect(center=face_rect.center))
        return face_rect

    def handle_event(self, event: pygame.event.Event) -> bool:
        if self.disabled:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.trigger()
                return True
        return False

    def trigger(self) -> None:
        if self.disabled:
            return
        if self._callback:
            self._callback()


class RoundButton(Button):
    """Square keypad key with rounded corners and an optional coloured outline."""

    def __init__(
        self,
        rect: pygame.Rect,
        label: str,
        font: pygame.font.Font,
        *,
        text_color: tuple[int, int, int] = settings.COLOR_PURPLE,
        callback: Optional[Callable[[], None]] = None,
        outlined: bool = False,
    ) -> None:
        super().__init__(
            rect,
            label,
            font,
            WHITE_PALETTE,
            text_color=text_color,
            callback=callback,
            corner_radius=25,
        )
        self.outlined = outlined

    def render(
        self,
        surface: pygame.Surface,
        *,
        hover: bool = False,
        selected: bool = False,
    ) -> pygame.Rect:
        face_rect = super().render(surface, hover=hover, selected=selected)
        if self.outlined and not self.disabled:
            pygame.draw.rect(surface, self.text_color, face_rect, width=5, border_radius=25)
        return face_rect


class SegmentedControl:
    """Row of mutually exclusive options, like a segmented picker."""

    def __init__(
        self,
        rect: pygame.Rect,
        options: Sequence[int],
        font: pygame.font.Font,
        *,
        selected_index: int = 0,
    ) -> None:
        self.rect = rect
        self.options = list(options)
        self.font = font
        self.selected_index = selected_index

    @property
    def value(self) -> int:
        return self.options[self.selected_index]

    def set_rect(self, rect: pygame.Rect) -> None:
        self.rect = rect

    def segment_rects(self) -> list[pygame.Rect]:
        width = self.rect.width // len(self.options)
        return [
            pygame.Rect(self.rect.left + index * width, self.rect.top, width, self.rect.height)
            for index in range(len(self.options))
        ]

    def select(self, index: int) -> None:
        self.selected_index = max(0, min(index, len(self.options) - 1))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for index, rect in enumerate(self.segment_rects()):
                if rect.collidepoint(event.pos):
                    self.select(index)
                    return True
        return False

    def render(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, (238, 238, 242), self.rect, border_radius=8)
        for index, rect in enumerate(self.segment_rects()):
            selected = index == self.selected_index
            if selected:
                pygame.draw.rect(surface, settings.COLOR_CARD, rect.inflate(-4, -4), border_radius=7)
            label = self.font.render(str(self.options[index]), True, settings.COLOR_TEXT_PRIMARY)
            surface.blit(label, label.get_rect(center=rect.center))
        pygame.draw.rect(surface, settings.COLOR_PURPLE, self.rect, width=2, border_radius=8)


class Slider:
    """Horizontal integer slider with a fixed step of one."""

    def __init__(
        self,
        rect: pygame.Rect,
        minimum: int,
        maximum: int,
        *,
        value: int | None = None,
    ) -> None:
        self.rect = rect
        self.minimum = minimum
        self.maximum = maximum
        self.value = minimum if value is None else max(minimum, min(value, maximum))
        self.dragging = False

    def set_rect(self, rect: pygame.Rect) -> None:
        self.rect = rect

    def set_value(self, value: int) -> None:
        self.value = max(self.minimum, min(int(value), self.maximum))

    def value_at(self, x: float) -> int:
        span = max(self.rect.width, 1)
        ratio = max(0.0, min(1.0, (x - self.rect.left) / span))
        return self.minimum + int(round(ratio * (self.maximum - self.minimum)))

    def knob_center(self) -> tuple[int, int]:
        steps = max(self.maximum - self.minimum, 1)
        ratio = (self.value - self.minimum) / steps
        return (int(self.rect.left + ratio * self.rect.width), self.rect.centery)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.inflate(24, 24).collidepoint(event.pos):
                self.dragging = True
                self.set_value(self.value_at(event.pos[0]))
                return True
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self.set_value(self.value_at(event.pos[0]))
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was_dragging = self.dragging
            self.dragging = False
            return was_dragging
        return False

    def render(self, surface: pygame.Surface) -> None:
        track = pygame.Rect(self.rect.left, self.rect.centery - 3, self.rect.width, 6)
        pygame.draw.rect(surface, (220, 220, 228), track, border_radius=3)
        knob_x, knob_y = self.knob_center()
        filled = pygame.Rect(track.left, track.top, knob_x - track.left, track.height)
        pygame.draw.rect(surface, settings.COLOR_PURPLE, filled, border_radius=3)
        pygame.draw.circle(surface, (200, 200, 210), (knob_x, knob_y + 2), 15)
        pygame.draw.circle(surface, settings.COLOR_CARD, (knob_x, knob_y), 14)


__all__ = [
    "Palette",
    "WHITE_PALETTE",
    "PURPLE_PALETTE",
    "draw_glossy_button",
    "Button",
    "RoundButton",
    "SegmentedControl",
    "Slider",
]
