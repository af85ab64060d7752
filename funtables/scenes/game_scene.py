"""Game screen: question prompt, answer display and numeric keypad."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List

import pygame

from .. import settings
from ..models import GameOver, NextQuestion, SubmitResult
from ..session import GameSession
from ..ui import PURPLE_PALETTE, WHITE_PALETTE, Button, RoundButton
from .base import Scene

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from ..app import App

logger = logging.getLogger(__name__)

KEY_SIZE = 85
KEY_GAP = 20


class GameScene(Scene):
    """Runs one game session and drives its timed feedback and transitions."""

    def __init__(self, app: "App", session: GameSession, intro_delay: float = 0.0) -> None:
        super().__init__(app)
        self.session = session
        self._unsubscribe = session.subscribe(self._on_session_change)

        self.header_font = settings.load_font(26, bold=True)
        self.question_font = settings.load_font(90, bold=True)
        self.answer_font = settings.load_font(60, bold=True)
        self.answer_font_light = settings.load_font(60)
        self.key_font = settings.load_font(56, bold=True)
        self.dialog_title_font = settings.load_font(34, bold=True)
        self.dialog_font = settings.load_font(24)

        self.feedback: SubmitResult | None = None
        self.input_locked = False
        self.game_over: GameOver | None = None
        self._answer_surface: pygame.Surface | None = None

        self._slide_from = 0.0
        self._slide_to = 0.0
        self._slide_started = 0.0

        self.new_game_button = Button(
            pygame.Rect(0, 0, 150, 50),
            "New Game",
            self.header_font,
            PURPLE_PALETTE,
            callback=self.new_game,
        )
        self.digit_keys: List[RoundButton] = [
            RoundButton(
                pygame.Rect(0, 0, KEY_SIZE, KEY_SIZE),
                str(digit),
                self.key_font,
                callback=lambda digit=digit: self.press_digit(digit),
            )
            for digit in range(10)
        ]
        self.clear_key = RoundButton(
            pygame.Rect(0, 0, KEY_SIZE, KEY_SIZE),
            "✘",
            self.key_font,
            text_color=settings.COLOR_RED,
            callback=self.press_clear,
            outlined=True,
        )
        self.check_key = RoundButton(
            pygame.Rect(0, 0, KEY_SIZE, KEY_SIZE),
            "✓",
            self.key_font,
            text_color=settings.COLOR_GREEN,
            callback=self.check_answer,
            outlined=True,
        )
        self.play_again_button = Button(
            pygame.Rect(0, 0, 150, 56),
            "Yes",
            self.dialog_font,
            PURPLE_PALETTE,
            callback=self.play_again,
        )
        self.settings_button = Button(
            pygame.Rect(0, 0, 150, 56),
            "Settings",
            self.dialog_font,
            WHITE_PALETTE,
            text_color=settings.COLOR_PURPLE,
            callback=self.new_game,
        )

        self._layout_size: tuple[int, int] | None = None
        self._layout(self.app.screen.get_size())
        self._start_intro(intro_delay)
        self._refresh_key_states()

    # Event handling -------------------------------------------------
    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if self.game_over is not None:
                self._handle_dialog_event(event)
                continue
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.new_game()
                    return
                if event.key in (pygame.K_BACKSPACE, pygame.K_DELETE):
                    self.clear_key.trigger()
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    self.check_key.trigger()
                elif event.unicode and event.unicode in "0123456789":
                    self.digit_keys[int(event.unicode)].trigger()
                continue
            if self.new_game_button.handle_event(event):
                return
            for key in (*self.digit_keys, self.clear_key, self.check_key):
                if key.handle_event(event):
                    break

    def _handle_dialog_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.play_again()
            elif event.key == pygame.K_ESCAPE:
                self.new_game()
            return
        if not self.play_again_button.handle_event(event):
            self.settings_button.handle_event(event)

    # Actions --------------------------------------------------------
    def press_digit(self, digit: int) -> None:
        if self.input_locked:
            return
        self.session.append_digit(digit)

    def press_clear(self) -> None:
        if self.input_locked:
            return
        self.session.clear_answer()

    def check_answer(self) -> None:
        if self.input_locked or not self.session.can_submit:
            return
        self.feedback = self.session.submit_answer()
        self.input_locked = True
        self._refresh_key_states()
        self._slide_question(self._off_screen())
        self.scheduler.schedule(settings.FEEDBACK_DURATION, self._finish_feedback)

    def _finish_feedback(self) -> None:
        outcome = self.session.advance()
        self.feedback = None
        self.input_locked = False
        if isinstance(outcome, NextQuestion):
            self._place_question(-self._off_screen())
            self.scheduler.schedule(
                settings.QUESTION_SLIDE_DELAY - settings.FEEDBACK_DURATION,
                lambda: self._slide_question(0.0),
            )
        else:
            self.game_over = outcome
        self._refresh_key_states()

    def play_again(self) -> None:
        self.scheduler.cancel_all()
        self.session.reset()
        self.feedback = None
        self.input_locked = False
        self.game_over = None
        self._start_intro(settings.QUESTION_SETTLE_DELAY - settings.GAME_REVEAL_DELAY)
        self._refresh_key_states()

    def new_game(self) -> None:
        from .settings_scene import SettingsScene

        self.scheduler.cancel_all()
        self._unsubscribe()
        self.app.change_scene(SettingsScene)

    def _on_session_change(self, session: GameSession, event: str) -> None:
        self._answer_surface = None
        self._refresh_key_states()

    def _refresh_key_states(self) -> None:
        for key in (*self.digit_keys, self.clear_key):
            key.disabled = self.input_locked
        self.check_key.disabled = self.input_locked or not self.session.can_submit

    # Transitions ----------------------------------------------------
    def _off_screen(self) -> float:
        return float(self.app.screen.get_width())

    def _start_intro(self, delay: float) -> None:
        self._place_question(-self._off_screen())
        self.scheduler.schedule(delay, lambda: self._slide_question(0.0))

    def _place_question(self, offset: float) -> None:
        self._slide_from = self._slide_to = offset
        self._slide_started = self.elapsed

    def _slide_question(self, target: float) -> None:
        self._slide_from = self.question_offset()
        self._slide_to = target
        self._slide_started = self.elapsed

    def question_offset(self) -> float:
        progress = (self.elapsed - self._slide_started) / settings.QUESTION_SLIDE_DURATION
        eased = Scene.ease_out(progress)
        return self._slide_from + (self._slide_to - self._slide_from) * eased

    # Layout ---------------------------------------------------------
    def _layout(self, size: tuple[int, int]) -> None:
        if size == self._layout_size:
            return
        self._layout_size = size
        width, height = size
        margin = settings.SCREEN_MARGIN

        self.new_game_button.set_rect(pygame.Rect(margin, margin, 150, 50))
        self.answer_rect = pygame.Rect(0, 0, int(width * 0.8), 100)
        self.answer_rect.center = (width // 2, margin + 260)
        self.question_center = (width // 2, margin + 140)

        grid_width = KEY_SIZE * 3 + KEY_GAP * 2
        left = (width - grid_width) // 2
        top = self.answer_rect.bottom + 40
        pad = [*self.digit_keys[1:], self.clear_key, self.digit_keys[0], self.check_key]
        for index, key in enumerate(pad):
            row, column = divmod(index, 3)
            key.set_rect(
                pygame.Rect(
                    left + column * (KEY_SIZE + KEY_GAP),
                    top + row * (KEY_SIZE + KEY_GAP),
                    KEY_SIZE,
                    KEY_SIZE,
                )
            )

        dialog = pygame.Rect(0, 0, min(width - margin * 2, 420), 240)
        dialog.center = (width // 2, height // 2)
        self.dialog_rect = dialog
        self.play_again_button.set_rect(pygame.Rect(dialog.left + 40, dialog.bottom - 80, 150, 56))
        self.settings_button.set_rect(pygame.Rect(dialog.right - 190, dialog.bottom - 80, 150, 56))

    # Rendering ------------------------------------------------------
    def render(self, surface: pygame.Surface) -> None:
        self._layout(surface.get_size())
        Scene.draw_background(surface)
        self._draw_header(surface)
        self._draw_question(surface)
        self._draw_answer(surface)
        self._draw_keypad(surface)
        if self.game_over is not None:
            self._draw_game_over(surface)

    def _draw_header(self, surface: pygame.Surface) -> None:
        mouse = pygame.mouse.get_pos()
        self.new_game_button.render(surface, hover=self.new_game_button.rect.collidepoint(mouse))
        label = f"Question {self.session.question_number}/{self.session.total}"
        text = self.header_font.render(label, True, settings.COLOR_TEXT_LIGHT)
        surface.blit(
            text,
            text.get_rect(midright=(surface.get_width() - settings.SCREEN_MARGIN, self.new_game_button.rect.centery)),
        )

    def _draw_question(self, surface: pygame.Surface) -> None:
        prompt = self.session.prompt
        if not prompt:
            return
        center = (self.question_center[0] + int(self.question_offset()), self.question_center[1])
        shadow = self.question_font.render(prompt, True, settings.COLOR_SHADOW)
        shadow.set_alpha(90)
        surface.blit(shadow, shadow.get_rect(center=(center[0] + 3, center[1] + 5)))
        text = self.question_font.render(prompt, True, settings.COLOR_TEXT_LIGHT)
        surface.blit(text, text.get_rect(center=center))

    def _answer_color(self) -> tuple[int, int, int]:
        if self.feedback is not None:
            return settings.COLOR_GREEN if self.feedback.is_correct else settings.COLOR_RED
        return settings.COLOR_PURPLE if self.session.pending_answer else settings.COLOR_TEXT_DIM

    def _draw_answer(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, settings.COLOR_CARD, self.answer_rect, border_radius=20)
        if self.feedback is not None:
            border = self._answer_color()
        else:
            border = settings.COLOR_BLUE
        pygame.draw.rect(surface, border, self.answer_rect, width=5, border_radius=20)
        if self._answer_surface is None or self.feedback is not None:
            answer = self.session.pending_answer
            font = self.answer_font if answer else self.answer_font_light
            self._answer_surface = font.render(answer or "0", True, self._answer_color())
        surface.blit(self._answer_surface, self._answer_surface.get_rect(center=self.answer_rect.center))

    def _draw_keypad(self, surface: pygame.Surface) -> None:
        mouse = pygame.mouse.get_pos()
        for key in (*self.digit_keys, self.clear_key, self.check_key):
            key.render(surface, hover=key.rect.collidepoint(mouse))

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(settings.COLOR_OVERLAY)
        surface.blit(overlay, (0, 0))
        Scene.draw_card(surface, self.dialog_rect)
        title = self.dialog_title_font.render("Game Over", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(title, title.get_rect(midtop=(self.dialog_rect.centerx, self.dialog_rect.top + 28)))
        message = (
            f"You scored {self.game_over.score}/{self.game_over.total}.",
            "Wanna play again?",
        )
        for index, line in enumerate(message):
            text = self.dialog_font.render(line, True, settings.COLOR_SHADOW)
            surface.blit(text, text.get_rect(midtop=(self.dialog_rect.centerx, self.dialog_rect.top + 84 + index * 32)))
        mouse = pygame.mouse.get_pos()
        self.play_again_button.render(surface, hover=self.play_again_button.rect.collidepoint(mouse))
        self.settings_button.render(surface, hover=self.settings_button.rect.collidepoint(mouse))


__all__ = ["GameScene"]
