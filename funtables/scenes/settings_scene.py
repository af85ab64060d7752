"""Settings screen: pick how many questions and which tables to practise."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import pygame

from .. import settings
from ..models import GameConfig
from ..session import GameSession
from ..ui import Button, SegmentedControl, Slider, WHITE_PALETTE
from .base import Scene
from .game_scene import GameScene

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from ..app import App

logger = logging.getLogger(__name__)


class SettingsScene(Scene):
    """Lets the player choose the question count and the highest times table."""

    def __init__(self, app: "App", config: GameConfig | None = None) -> None:
        super().__init__(app)
        config = (config or GameConfig()).validate()

        self.title_font = settings.load_title_font(50)
        self.section_font = settings.load_font(30, bold=True)
        self.value_font = settings.load_font(24)
        self.option_font = settings.load_font(20)
        self.button_font = settings.load_font(30, bold=True)

        options = list(settings.QUESTION_COUNT_OPTIONS)
        if config.question_count not in options:
            logger.info("Adding %d to the question count choices", config.question_count)
            options = sorted([*options, config.question_count])
        selected = options.index(config.question_count)
        self.question_picker = SegmentedControl(
            pygame.Rect(0, 0, 300, 36),
            options,
            self.option_font,
            selected_index=selected,
        )
        self.multiplier_slider = Slider(
            pygame.Rect(0, 0, 300, 30),
            settings.MIN_MULTIPLIER,
            settings.MAX_MULTIPLIER,
            value=config.max_multiplier,
        )
        self.start_button = Button(
            pygame.Rect(0, 0, 240, 80),
            "Start Game",
            self.button_font,
            WHITE_PALETTE,
            text_color=settings.COLOR_BLUE,
            callback=self.start_game,
        )

        self.loading = False
        self.leave_started = 0.0

    @property
    def config(self) -> GameConfig:
        return GameConfig(
            question_count=self.question_picker.value,
            max_multiplier=self.multiplier_slider.value,
        )

    # Event handling -------------------------------------------------
    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if self.loading:
                return
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    self.start_game()
                    return
                if event.key == pygame.K_LEFT:
                    self.multiplier_slider.set_value(self.multiplier_slider.value - 1)
                elif event.key == pygame.K_RIGHT:
                    self.multiplier_slider.set_value(self.multiplier_slider.value + 1)
                elif event.key == pygame.K_UP:
                    self.question_picker.select(self.question_picker.selected_index + 1)
                elif event.key == pygame.K_DOWN:
                    self.question_picker.select(self.question_picker.selected_index - 1)
                continue
            if self.start_button.handle_event(event):
                return
            if self.question_picker.handle_event(event):
                continue
            self.multiplier_slider.handle_event(event)

    # Logic ----------------------------------------------------------
    def start_game(self) -> None:
        if self.loading:
            return
        config = self.config
        logger.info(
            "Starting game: %d questions, tables up to %d",
            config.question_count,
            config.max_multiplier,
        )
        self.loading = True
        self.leave_started = self.elapsed
        self.scheduler.schedule(settings.GAME_REVEAL_DELAY, lambda: self._enter_game(config))

    def _enter_game(self, config: GameConfig) -> None:
        self.app.change_scene(
            GameScene,
            session=GameSession.create(config),
            intro_delay=settings.QUESTION_SETTLE_DELAY - settings.GAME_REVEAL_DELAY,
        )

    def exit_progress(self) -> float:
        if not self.loading:
            return 0.0
        return Scene.ease_out((self.elapsed - self.leave_started) / settings.SETTINGS_EXIT_DURATION)

    # Rendering ------------------------------------------------------
    def render(self, surface: pygame.Surface) -> None:
        Scene.draw_background(surface)
        progress = self.exit_progress()
        width = surface.get_width()
        height = surface.get_height()
        margin = settings.SCREEN_MARGIN

        title_y = margin + 40 - int(height * progress)
        self._draw_title(surface, title_y)

        card_width = min(width - margin * 2, 480)
        left = (width - card_width) // 2
        questions_card = pygame.Rect(left - int(width * progress), title_y + 110, card_width, 150)
        tables_card = pygame.Rect(left + int(width * progress), questions_card.bottom + 24, card_width, 190)
        self._draw_questions_card(surface, questions_card)
        self._draw_tables_card(surface, tables_card)
        self._draw_start_button(surface, 1.0 - progress)

    def _draw_title(self, surface: pygame.Surface, top: int) -> None:
        center_x = surface.get_width() // 2
        shadow = self.title_font.render("Fun × Tables", True, settings.COLOR_SHADOW)
        shadow.set_alpha(90)
        surface.blit(shadow, shadow.get_rect(midtop=(center_x + 2, top + 4)))
        title = self.title_font.render("Fun × Tables", True, settings.COLOR_TEXT_LIGHT)
        surface.blit(title, title.get_rect(midtop=(center_x, top)))

    def _draw_questions_card(self, surface: pygame.Surface, card: pygame.Rect) -> None:
        Scene.draw_card(surface, card)
        heading = self.section_font.render("Number of Questions", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(heading, heading.get_rect(midtop=(card.centerx, card.top + 28)))
        picker_rect = pygame.Rect(card.left + 30, card.top + 86, card.width - 60, 36)
        self.question_picker.set_rect(picker_rect)
        self.question_picker.render(surface)

    def _draw_tables_card(self, surface: pygame.Surface, card: pygame.Rect) -> None:
        Scene.draw_card(surface, card)
        heading = self.section_font.render("Max times tables", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(heading, heading.get_rect(midtop=(card.centerx, card.top + 28)))
        value = self.value_font.render(str(self.multiplier_slider.value), True, settings.COLOR_TEXT_DIM)
        surface.blit(value, value.get_rect(midtop=(card.centerx, card.top + 72)))

        low = self.option_font.render(str(settings.MIN_MULTIPLIER), True, settings.COLOR_TEXT_DIM)
        high = self.option_font.render(str(settings.MAX_MULTIPLIER), True, settings.COLOR_TEXT_DIM)
        row_y = card.top + 135
        surface.blit(low, low.get_rect(midleft=(card.left + 30, row_y)))
        surface.blit(high, high.get_rect(midright=(card.right - 30, row_y)))
        slider_left = card.left + 30 + low.get_width() + 20
        slider_right = card.right - 30 - high.get_width() - 20
        self.multiplier_slider.set_rect(pygame.Rect(slider_left, row_y - 15, slider_right - slider_left, 30))
        self.multiplier_slider.render(surface)

    def _draw_start_button(self, surface: pygame.Surface, opacity: float) -> None:
        if opacity <= 0:
            return
        rect = pygame.Rect(0, 0, 240, 80)
        rect.midbottom = (surface.get_width() // 2, surface.get_height() - settings.SCREEN_MARGIN - 20)
        self.start_button.set_rect(rect)
        if opacity >= 1:
            self.start_button.render(surface, hover=rect.collidepoint(pygame.mouse.get_pos()))
            return
        layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        self.start_button.render(layer)
        layer.set_alpha(int(255 * opacity))
        surface.blit(layer, (0, 0))


__all__ = ["SettingsScene"]
