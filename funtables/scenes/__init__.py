"""Scene definitions for the times tables game."""

from .game_scene import GameScene
from .settings_scene import SettingsScene

__all__ = [
    "GameScene",
    "SettingsScene",
]
