import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from funtables import settings
from funtables.models import GameConfig
from funtables.session import GameSession


class HeadlessApp:
    """Stands in for ``App``: a screen and scene switching, but no main loop."""

    def __init__(self) -> None:
        self.screen = pygame.display.set_mode(settings.SCREEN_SIZE)
        self.scene = None

    def change_scene(self, new_scene_cls, **kwargs):
        self.scene = new_scene_cls(self, **kwargs)


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def session(rng):
    return GameSession.create(GameConfig(question_count=3, max_multiplier=9), rng=rng)


@pytest.fixture()
def headless_app():
    pygame.init()
    app = HeadlessApp()
    yield app
    pygame.quit()
