"""Dataclasses used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import settings


class InvalidConfiguration(ValueError):
    """Raised when a game is configured outside the supported ranges."""


@dataclass(frozen=True)
class GameConfig:
    question_count: int = settings.DEFAULT_QUESTION_COUNT
    max_multiplier: int = settings.MIN_MULTIPLIER

    def validate(self) -> "GameConfig":
        """Return ``self`` or raise :class:`InvalidConfiguration`."""

        if not _is_int(self.question_count) or self.question_count < 1:
            raise InvalidConfiguration(
                f"question_count must be a positive integer, got {self.question_count!r}"
            )
        if not _is_int(self.max_multiplier) or not (
            settings.MIN_MULTIPLIER <= self.max_multiplier <= settings.MAX_MULTIPLIER
        ):
            raise InvalidConfiguration(
                f"max_multiplier must be between {settings.MIN_MULTIPLIER} and "
                f"{settings.MAX_MULTIPLIER}, got {self.max_multiplier!r}"
            )
        return self


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Question:
    left: int
    right: int

    @property
    def answer(self) -> int:
        return self.left * self.right

    @property
    def prompt(self) -> str:
        return f"{self.left} x {self.right}"


class SubmitResult(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"

    @property
    def is_correct(self) -> bool:
        return self is SubmitResult.CORRECT


@dataclass(frozen=True)
class NextQuestion:
    index: int


@dataclass(frozen=True)
class GameOver:
    score: int
    total: int


__all__ = [
    "InvalidConfiguration",
    "GameConfig",
    "Question",
    "SubmitResult",
    "NextQuestion",
    "GameOver",
]
