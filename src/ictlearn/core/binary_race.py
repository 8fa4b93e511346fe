"""Binary Race game rules.

Players convert numbers between binary and decimal against a 60 second
clock. Correct answers score 10 points plus 2 per answer already in the
streak; a streak of five or more also adds 2 seconds to the clock.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Literal

import structlog

logger = structlog.get_logger(__name__)

Direction = Literal["bin-to-dec", "dec-to-bin"]

ROUND_SECONDS = 60
BASE_POINTS = 10
STREAK_BONUS = 2
BONUS_STREAK = 5
BONUS_SECONDS = 2
MAX_VALUE = 255


@dataclass
class RaceQuestion:
    """A single conversion prompt."""

    decimal: int
    binary: str
    type: Direction

    @property
    def prompt(self) -> str:
        return self.binary if self.type == "bin-to-dec" else str(self.decimal)

    @property
    def expected(self) -> str:
        return str(self.decimal) if self.type == "bin-to-dec" else self.binary


@dataclass
class RaceAnswerResult:
    """Outcome of one answer."""

    is_correct: bool
    correct_answer: str
    points: int
    streak: int
    bonus_seconds: int
    time_left: int


def generate_question(rng: random.Random | None = None) -> RaceQuestion:
    rng = rng or random.Random()
    decimal = rng.randint(1, MAX_VALUE)
    direction: Direction = rng.choice(["bin-to-dec", "dec-to-bin"])
    return RaceQuestion(decimal=decimal, binary=format(decimal, "b"), type=direction)


def generate_questions(count: int, seed: int | None = None) -> list[RaceQuestion]:
    """Generate count questions. The same seed yields the same list."""
    rng = random.Random(seed)
    return [generate_question(rng) for _ in range(count)]


def check_answer(question: RaceQuestion, answer: str) -> bool:
    """Compare a player's answer with the question.

    Decimal answers compare as integers; binary answers ignore leading
    zeros. Blank or non-numeric answers are wrong.
    """
    answer = answer.strip()
    if not answer:
        return False

    if question.type == "bin-to-dec":
        if not (answer.isascii() and answer.isdigit()):
            return False
        return int(answer) == question.decimal

    if any(c not in "01" for c in answer):
        return False
    return answer.lstrip("0") == question.binary


def score_answer(
    question: RaceQuestion,
    answer: str,
    streak: int = 0,
    time_left: int = ROUND_SECONDS,
) -> RaceAnswerResult:
    """Score an answer given the current streak and clock."""
    correct = check_answer(question, answer)

    points = BASE_POINTS + streak * STREAK_BONUS if correct else 0
    new_streak = streak + 1 if correct else 0
    bonus = BONUS_SECONDS if correct and new_streak >= BONUS_STREAK else 0

    result = RaceAnswerResult(
        is_correct=correct,
        correct_answer=question.expected,
        points=points,
        streak=new_streak,
        bonus_seconds=bonus,
        time_left=min(time_left + bonus, ROUND_SECONDS),
    )
    logger.debug(
        "binary_race_answer",
        question_type=question.type,
        is_correct=correct,
        points=points,
        streak=new_streak,
    )
    return result
