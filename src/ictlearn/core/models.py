"""Record types for the learning hub store.

Every entity is a flat dataclass. Cross references are plain integer ids
(user_id, topic_id, quiz_id, game_id); nothing enforces them at this layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


# =============================================================================
# USERS & TOPICS
# =============================================================================


@dataclass
class User:
    """A learner account."""

    id: int
    username: str
    email: str
    level: int = 1
    total_points: int = 0
    streak: int = 0
    time_spent: int = 0  # minutes
    completed_topics: int = 0
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Topic:
    """A lesson topic shown on the topics grid."""

    id: int
    title: str
    description: str
    difficulty: str  # Basic | Beginner | Intermediate | Advanced | Fun
    duration: int  # minutes
    icon: str
    gradient: str
    rating: int = 0  # tenths of a star, 48 == 4.8
    is_locked: bool = False
    prerequisite_id: int | None = None


@dataclass
class UserProgress:
    """Completion percentage of one topic for one user."""

    id: int
    user_id: int
    topic_id: int
    progress: int = 0  # 0-100
    completed: bool = False
    last_accessed: datetime = field(default_factory=utcnow)


# =============================================================================
# QUIZZES
# =============================================================================


@dataclass
class Quiz:
    """A multiple choice question attached to a topic."""

    id: int
    topic_id: int
    question: str
    options: list[str]
    correct_answer: int  # index into options
    difficulty: str

    def is_correct(self, selected_answer: int) -> bool:
        """Check a selected option index against the answer key."""
        return selected_answer == self.correct_answer


@dataclass
class UserQuizResult:
    """One answered quiz question."""

    id: int
    user_id: int
    quiz_id: int
    selected_answer: int
    is_correct: bool
    time_spent: int  # seconds
    completed_at: datetime = field(default_factory=utcnow)


# =============================================================================
# ACHIEVEMENTS & GAMES
# =============================================================================


@dataclass
class Achievement:
    """A badge earned by a user."""

    id: int
    user_id: int
    title: str
    description: str
    icon: str
    color: str
    earned_at: datetime = field(default_factory=utcnow)


@dataclass
class Game:
    """A browser mini game and its global stats."""

    id: int
    title: str
    description: str
    type: str  # Binary Race | Network Builder | Logic Puzzle
    gradient: str
    icon: str
    high_score: int = 0
    times_played: int = 0


@dataclass
class UserGameScore:
    """A finished game round."""

    id: int
    user_id: int
    game_id: int
    score: int
    played_at: datetime = field(default_factory=utcnow)


@dataclass
class UserSummary:
    """Dashboard aggregate for one user."""

    user_id: int
    topics_total: int
    topics_completed: int
    average_progress: float
    quizzes_answered: int
    quizzes_correct: int
    quiz_accuracy: float  # percentage
    achievements: int
    total_points: int
    streak: int
    hours_spent: int
    best_scores: dict[int, int] = field(default_factory=dict)  # game_id -> score
