"""Game session state machine: questions, answer buffer, scoring and progression."""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Tuple, Union

from . import settings
from .models import GameConfig, GameOver, NextQuestion, Question, SubmitResult

logger = logging.getLogger(__name__)

AdvanceResult = Union[NextQuestion, GameOver]
Listener = Callable[["GameSession", str], None]


class SessionStateError(RuntimeError):
    """Raised when an operation is called while its preconditions do not hold."""


class GameSession:
    """Owns one play-through from the first question to game over.

    The session never advances by itself: ``submit_answer`` only scores the
    pending answer, and the caller decides when to ``advance``. That leaves
    the presentation layer free to show feedback for as long as it likes.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._listeners: List[Listener] = []
        self._start(config)

    @classmethod
    def create(cls, config: GameConfig, rng: Optional[random.Random] = None) -> "GameSession":
        return cls(config, rng=rng)

    # Read accessors -------------------------------------------------
    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def score(self) -> int:
        return self._score

    @property
    def pending_answer(self) -> str:
        return self._pending_answer

    @property
    def is_finished(self) -> bool:
        return self._current_index >= len(self._questions)

    @property
    def awaiting_advance(self) -> bool:
        """True between a submission and the following ``advance``."""

        return self._submitted

    @property
    def current_question(self) -> Question | None:
        if self.is_finished:
            return None
        return self._questions[self._current_index]

    @property
    def prompt(self) -> str:
        question = self.current_question
        return question.prompt if question is not None else ""

    @property
    def question_number(self) -> int:
        return min(self._current_index + 1, self.total)

    @property
    def can_submit(self) -> bool:
        return bool(self._pending_answer) and not self.is_finished and not self._submitted

    # Observers ------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for state changes and return an unsubscribe function."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(self, event)

    # Operations -----------------------------------------------------
    def append_digit(self, digit: int) -> None:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"digit must be an integer between 0 and 9, got {digit!r}")
        if self.is_finished or len(self._pending_answer) >= settings.MAX_ANSWER_DIGITS:
            return
        # A zero is only accepted once another digit has been typed.
        if not self._pending_answer and digit == 0:
            return
        self._pending_answer += str(digit)
        self._notify("digit")

    def clear_answer(self) -> None:
        if not self._pending_answer:
            return
        self._pending_answer = ""
        self._notify("clear")

    def submit_answer(self) -> SubmitResult:
        if self.is_finished:
            raise SessionStateError("cannot submit an answer after the game is over")
        if not self._pending_answer:
            raise SessionStateError("cannot submit an empty answer")
        if self._submitted:
            raise SessionStateError("the current question was already answered")

        question = self._questions[self._current_index]
        self._submitted = True
        if int(self._pending_answer) == question.answer:
            self._score += 1
            result = SubmitResult.CORRECT
        else:
            result = SubmitResult.INCORRECT
        logger.debug(
            "Question %d/%d: %s = %s (%s)",
            self._current_index + 1,
            self.total,
            question.prompt,
            self._pending_answer,
            result.value,
        )
        self._notify("submit")
        return result

    def advance(self) -> AdvanceResult:
        self._pending_answer = ""
        self._submitted = False
        if self._current_index < len(self._questions) - 1:
            self._current_index += 1
            self._notify("advance")
            return NextQuestion(self._current_index)

        already_finished = self.is_finished
        self._current_index = len(self._questions)
        if not already_finished:
            logger.info("Game over: scored %d/%d", self._score, self.total)
            self._notify("advance")
        return GameOver(self._score, self.total)

    def reset(self, config: GameConfig | None = None) -> "GameSession":
        """Discard all progress and start over, keeping the same config unless given a new one."""

        self._start(config if config is not None else self._config)
        self._notify("reset")
        return self

    # Internal helpers -----------------------------------------------
    def _start(self, config: GameConfig) -> None:
        self._config = config.validate()
        self._questions = tuple(self._generate_questions(config))
        self._current_index = 0
        self._score = 0
        self._pending_answer = ""
        self._submitted = False
        logger.info(
            "New session: %d questions, tables up to %d",
            config.question_count,
            config.max_multiplier,
        )

    def _generate_questions(self, config: GameConfig) -> List[Question]:
        questions: List[Question] = []
        for _ in range(config.question_count):
            left = self._rng.randint(settings.MIN_MULTIPLIER, config.max_multiplier)
            right = self._rng.randint(settings.MIN_MULTIPLIER, settings.MAX_FACTOR)
            questions.append(Question(left, right))
        return questions


__all__ = ["AdvanceResult", "GameSession", "SessionStateError"]
