import random

import pygame
import pytest

from funtables import settings
from funtables.models import GameConfig, GameOver, SubmitResult
from funtables.scenes.game_scene import GameScene
from funtables.scenes.settings_scene import SettingsScene
from funtables.session import GameSession


def key(code, unicode=""):
    return pygame.event.Event(pygame.KEYDOWN, key=code, unicode=unicode, mod=0)


def digit_key(char):
    return key(getattr(pygame, f"K_{char}"), char)


def type_keys(scene, value):
    scene.handle_events([digit_key(char) for char in str(value)])


@pytest.fixture()
def game_scene(headless_app):
    session = GameSession.create(GameConfig(question_count=2, max_multiplier=6), rng=random.Random(5))
    headless_app.change_scene(GameScene, session=session)
    return headless_app.scene


def test_settings_scene_defaults(headless_app):
    scene = SettingsScene(headless_app)

    assert scene.config == GameConfig(question_count=5, max_multiplier=2)


def test_settings_keyboard_adjusts_controls(headless_app):
    scene = SettingsScene(headless_app)

    scene.handle_events([key(pygame.K_RIGHT)] * 20 + [key(pygame.K_UP), key(pygame.K_UP)])
    assert scene.config == GameConfig(question_count=15, max_multiplier=settings.MAX_MULTIPLIER)

    scene.handle_events([key(pygame.K_LEFT)] * 3 + [key(pygame.K_DOWN)] * 5)
    assert scene.config == GameConfig(question_count=5, max_multiplier=9)


def test_start_game_switches_after_reveal_delay(headless_app):
    scene = SettingsScene(headless_app, config=GameConfig(question_count=10, max_multiplier=7))
    headless_app.scene = scene

    scene.handle_events([key(pygame.K_RETURN)])
    assert scene.loading
    scene.update(settings.GAME_REVEAL_DELAY / 2)
    assert headless_app.scene is scene
    assert 0.0 < scene.exit_progress() < 1.0

    # Input is ignored while the settings screen slides away.
    scene.handle_events([key(pygame.K_RIGHT)])
    assert scene.multiplier_slider.value == 7

    scene.update(settings.GAME_REVEAL_DELAY)
    game = headless_app.scene
    assert isinstance(game, GameScene)
    assert game.session.config == GameConfig(question_count=10, max_multiplier=7)
    assert len(game.session.questions) == 10


def test_settings_scene_renders_while_leaving(headless_app):
    scene = SettingsScene(headless_app)
    scene.render(headless_app.screen)
    scene.start_game()
    scene.update(0.3)
    scene.render(headless_app.screen)


def test_keyboard_fills_answer(game_scene):
    type_keys(game_scene, "0405")

    assert game_scene.session.pending_answer == "405"

    game_scene.handle_events([key(pygame.K_BACKSPACE)])
    assert game_scene.session.pending_answer == ""


def test_check_key_disabled_without_answer(game_scene):
    assert game_scene.check_key.disabled
    game_scene.handle_events([key(pygame.K_RETURN)])
    assert game_scene.feedback is None

    type_keys(game_scene, "7")
    assert not game_scene.check_key.disabled


def test_correct_answer_shows_feedback_then_advances(game_scene):
    session = game_scene.session
    type_keys(game_scene, session.current_question.answer)

    game_scene.handle_events([key(pygame.K_RETURN)])

    assert game_scene.feedback is SubmitResult.CORRECT
    assert game_scene.input_locked
    assert all(button.disabled for button in game_scene.digit_keys)
    assert session.score == 1

    type_keys(game_scene, "9")
    assert session.pending_answer == str(session.current_question.answer)

    game_scene.update(settings.FEEDBACK_DURATION + 0.01)

    assert game_scene.feedback is None
    assert not game_scene.input_locked
    assert session.current_index == 1
    assert session.pending_answer == ""


def test_finishing_all_questions_opens_game_over(game_scene):
    session = game_scene.session
    type_keys(game_scene, session.current_question.answer)
    game_scene.check_answer()
    game_scene.update(settings.FEEDBACK_DURATION + 0.01)

    type_keys(game_scene, session.current_question.answer + 1)
    game_scene.check_answer()
    assert game_scene.feedback is SubmitResult.INCORRECT
    game_scene.update(settings.FEEDBACK_DURATION + 0.01)

    assert game_scene.game_over == GameOver(1, 2)
    game_scene.render(game_scene.app.screen)

    # Keypad input is ignored behind the dialog.
    type_keys(game_scene, "5")
    assert session.pending_answer == ""


def test_play_again_restarts_with_same_config(game_scene):
    session = game_scene.session
    for _ in range(session.total):
        session.advance()
    game_scene.game_over = GameOver(0, session.total)

    game_scene.handle_events([key(pygame.K_RETURN)])

    assert game_scene.game_over is None
    assert game_scene.session is session
    assert session.current_index == 0
    assert session.score == 0
    assert session.config == GameConfig(question_count=2, max_multiplier=6)


def test_new_game_returns_to_settings_with_defaults(game_scene):
    app = game_scene.app
    type_keys(game_scene, game_scene.session.current_question.answer)
    game_scene.check_answer()

    game_scene.handle_events([key(pygame.K_ESCAPE)])

    assert isinstance(app.scene, SettingsScene)
    assert app.scene.config == GameConfig()
    assert game_scene.scheduler.pending == 0


def test_mouse_click_on_keypad(game_scene):
    button = game_scene.digit_keys[8]
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=button.rect.center)

    game_scene.handle_events([click])

    assert game_scene.session.pending_answer == "8"


def test_question_slides_in_after_intro(headless_app):
    session = GameSession.create(GameConfig(question_count=3, max_multiplier=4))
    scene = GameScene(headless_app, session, intro_delay=0.3)

    assert scene.question_offset() == -headless_app.screen.get_width()
    scene.update(0.3)
    scene.update(settings.QUESTION_SLIDE_DURATION + 0.01)
    assert scene.question_offset() == pytest.approx(0.0)
    scene.render(headless_app.screen)


def test_prompt_slides_right_then_next_question_enters_from_left(game_scene):
    session = game_scene.session
    width = game_scene.app.screen.get_width()
    game_scene.update(0.01)
    game_scene.update(settings.QUESTION_SLIDE_DURATION + 0.01)
    assert game_scene.question_offset() == pytest.approx(0.0)

    type_keys(game_scene, session.current_question.answer)
    game_scene.check_answer()

    offsets = []
    for _ in range(99):
        game_scene.update(0.01)
        offsets.append(game_scene.question_offset())
    assert min(offsets) >= 0.0
    assert max(offsets) == pytest.approx(width)
    assert session.current_index == 0

    game_scene.update(0.02)
    assert session.current_index == 1
    assert game_scene.question_offset() == -width

    game_scene.update(settings.QUESTION_SLIDE_DELAY - settings.FEEDBACK_DURATION)
    game_scene.update(settings.QUESTION_SLIDE_DURATION + 0.01)
    assert game_scene.question_offset() == pytest.approx(0.0)


def test_settings_scene_keeps_custom_question_count(headless_app):
    scene = SettingsScene(headless_app, config=GameConfig(question_count=7, max_multiplier=4))

    assert scene.config == GameConfig(question_count=7, max_multiplier=4)
    assert scene.question_picker.options == [5, 7, 10, 15, 20]


def test_title_font_is_the_bold_body_font(headless_app):
    font = settings.load_title_font(40)

    assert isinstance(font, pygame.font.Font)
    assert font.get_height() > 0
