"""Global settings and helper functions for the times tables game."""

from __future__ import annotations

import pygame

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 960
SCREEN_SIZE = (SCREEN_WIDTH, SCREEN_HEIGHT)
FPS = 60
SCREEN_MARGIN = 32

# Game options.
QUESTION_COUNT_OPTIONS = (5, 10, 15, 20)
DEFAULT_QUESTION_COUNT = QUESTION_COUNT_OPTIONS[0]
MIN_MULTIPLIER = 2
MAX_MULTIPLIER = 12
MAX_FACTOR = 12
MAX_ANSWER_DIGITS = 3

# Transition timings in seconds.
SETTINGS_EXIT_DURATION = 0.7
GAME_REVEAL_DELAY = 1.2
QUESTION_SETTLE_DELAY = 1.5
FEEDBACK_DURATION = 1.0
QUESTION_SLIDE_DELAY = 2.0
QUESTION_SLIDE_DURATION = 0.35

# Colour palette: mint to purple background with white cards.
COLOR_TEXT_LIGHT = (255, 255, 255)
COLOR_TEXT_PRIMARY = (128, 50, 180)
COLOR_TEXT_DIM = (150, 150, 160)
COLOR_CARD = (255, 255, 255)
COLOR_SHADOW = (40, 40, 90)
COLOR_PURPLE = (128, 50, 180)
COLOR_BLUE = (0, 122, 255)
COLOR_GREEN = (52, 199, 89)
COLOR_RED = (255, 59, 48)
COLOR_DISABLED = (160, 160, 160)
COLOR_OVERLAY = (0, 0, 0, 120)

GRADIENT_TOP = (130, 225, 205)
GRADIENT_MIDDLE = (0, 122, 255)
GRADIENT_BOTTOM = (128, 50, 180)

FONT_PREFERRED = "Avenir Next"
BODY_FALLBACK = "Verdana"


def load_font(size: int, bold: bool = False) -> pygame.font.Font:
    """Return a font object, falling back to the default if preferred not found."""

    pygame.font.init()
    font_path = pygame.font.match_font(FONT_PREFERRED, bold=bold, italic=False)
    if not font_path:
        font_path = pygame.font.match_font(BODY_FALLBACK, bold=bold, italic=False)
    font = pygame.font.Font(font_path, size) if font_path else pygame.font.Font(None, size)
    if bold and not font_path:
        font.set_bold(True)
    return font


def load_title_font(size: int) -> pygame.font.Font:
    """Return the bold body font used for titles."""

    return load_font(size, bold=True)
