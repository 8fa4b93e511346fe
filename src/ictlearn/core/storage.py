"""In-memory store for users, topics, progress, quizzes, achievements and games.

Responsibilities:
- Hold every entity in plain dicts/lists for the life of the process
- Seed the demo data on construction (see ictlearn.core.seed)
- Provide get/set operations used by the web routes and the CLI

Nothing is persisted: a restart (or reset_storage()) brings back the seed.
Progress rows are keyed by (user_id, topic_id).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import structlog

from ictlearn.core import seed
from ictlearn.core.models import (
    Achievement,
    Game,
    Quiz,
    Topic,
    User,
    UserGameScore,
    UserProgress,
    UserQuizResult,
    UserSummary,
    utcnow,
)

logger = structlog.get_logger(__name__)


class DuplicateRecordError(Exception):
    """Raised when a record would break a uniqueness rule."""

    pass


class RecordNotFoundError(Exception):
    """Raised when a referenced record does not exist."""

    def __init__(self, entity: str, record_id: int):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class MemStorage:
    """Map-of-maps store with the demo data preloaded.

    Not synchronized: callers in one event loop never interleave inside
    a method, and there is no other writer.
    """

    def __init__(self, seed_data: bool = True):
        self._users: dict[int, User] = {}
        self._topics: dict[int, Topic] = {}
        self._progress: dict[tuple[int, int], UserProgress] = {}
        self._quizzes: dict[int, Quiz] = {}
        self._quiz_results: list[UserQuizResult] = []
        self._achievements: list[Achievement] = []
        self._games: dict[int, Game] = {}
        self._game_scores: list[UserGameScore] = []
        self._current_id = 1

        if seed_data:
            self._seed()

    def _next_id(self) -> int:
        next_id = self._current_id
        self._current_id += 1
        return next_id

    def _seed(self) -> None:
        for user in seed.seed_users():
            self._users[user.id] = user
        for topic in seed.seed_topics():
            self._topics[topic.id] = topic

        # Progress rows draw from the shared id counter
        for topic_id, progress in seed.DEMO_PROGRESS:
            self._progress[(seed.DEFAULT_USER_ID, topic_id)] = UserProgress(
                id=self._next_id(),
                user_id=seed.DEFAULT_USER_ID,
                topic_id=topic_id,
                progress=progress,
                completed=False,
            )

        for quiz in seed.seed_quizzes():
            self._quizzes[quiz.id] = quiz
        self._achievements = seed.seed_achievements()
        for game in seed.seed_games():
            self._games[game.id] = game

        logger.debug(
            "storage_seeded",
            users=len(self._users),
            topics=len(self._topics),
            quizzes=len(self._quizzes),
            games=len(self._games),
        )

    # =========================================================================
    # USERS
    # =========================================================================

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, username: str, email: str, **fields: Any) -> User:
        """Create a user.

        Args:
            username: Unique login name
            email: Unique email address
            **fields: Optional counters (level, total_points, streak, ...)

        Returns:
            The stored User

        Raises:
            DuplicateRecordError: If username or email is already taken
        """
        for existing in self._users.values():
            if existing.username == username:
                raise DuplicateRecordError(f"Username '{username}' already exists")
            if existing.email == email:
                raise DuplicateRecordError(f"Email '{email}' already exists")

        user = User(id=self._next_id(), username=username, email=email, **fields)
        self._users[user.id] = user
        logger.info("user_created", user_id=user.id, username=username)
        return user

    def update_user(self, user_id: int, updates: dict[str, Any]) -> User | None:
        """Merge updates into a user. Returns None if the user does not exist.

        Raises:
            DuplicateRecordError: If the new username or email belongs to another user
        """
        user = self._users.get(user_id)
        if user is None:
            return None

        updates = {k: v for k, v in updates.items() if k not in ("id", "created_at")}
        for other in self._users.values():
            if other.id == user_id:
                continue
            if "username" in updates and other.username == updates["username"]:
                raise DuplicateRecordError(f"Username '{updates['username']}' already exists")
            if "email" in updates and other.email == updates["email"]:
                raise DuplicateRecordError(f"Email '{updates['email']}' already exists")

        updated = replace(user, **updates)
        self._users[user_id] = updated
        logger.info("user_updated", user_id=user_id, fields=sorted(updates))
        return updated

    # =========================================================================
    # TOPICS
    # =========================================================================

    def get_all_topics(self) -> list[Topic]:
        return list(self._topics.values())

    def get_topic(self, topic_id: int) -> Topic | None:
        return self._topics.get(topic_id)

    def create_topic(self, **fields: Any) -> Topic:
        topic = Topic(id=self._next_id(), **fields)
        self._topics[topic.id] = topic
        logger.info("topic_created", topic_id=topic.id, title=topic.title)
        return topic

    # =========================================================================
    # PROGRESS
    # =========================================================================

    def get_user_progress(self, user_id: int) -> list[UserProgress]:
        return [p for p in self._progress.values() if p.user_id == user_id]

    def get_topic_progress(self, user_id: int, topic_id: int) -> UserProgress | None:
        return self._progress.get((user_id, topic_id))

    def update_progress(self, user_id: int, topic_id: int, progress: int) -> UserProgress:
        """Insert or replace the progress row for (user_id, topic_id).

        An existing row keeps its id. `completed` is set once progress
        reaches 100.
        """
        key = (user_id, topic_id)
        existing = self._progress.get(key)

        row = UserProgress(
            id=existing.id if existing else self._next_id(),
            user_id=user_id,
            topic_id=topic_id,
            progress=progress,
            completed=progress >= 100,
            last_accessed=utcnow(),
        )
        self._progress[key] = row

        logger.info(
            "progress_updated",
            user_id=user_id,
            topic_id=topic_id,
            progress=progress,
            completed=row.completed,
        )
        return row

    # =========================================================================
    # QUIZZES
    # =========================================================================

    def get_quizzes_by_topic(self, topic_id: int) -> list[Quiz]:
        return [q for q in self._quizzes.values() if q.topic_id == topic_id]

    def get_quiz(self, quiz_id: int) -> Quiz | None:
        return self._quizzes.get(quiz_id)

    def submit_quiz_result(
        self,
        user_id: int,
        quiz_id: int,
        selected_answer: int,
        is_correct: bool,
        time_spent: int,
    ) -> UserQuizResult:
        result = UserQuizResult(
            id=self._next_id(),
            user_id=user_id,
            quiz_id=quiz_id,
            selected_answer=selected_answer,
            is_correct=is_correct,
            time_spent=time_spent,
        )
        self._quiz_results.append(result)
        logger.info(
            "quiz_result_submitted",
            user_id=user_id,
            quiz_id=quiz_id,
            is_correct=is_correct,
        )
        return result

    def get_user_quiz_results(self, user_id: int) -> list[UserQuizResult]:
        return [r for r in self._quiz_results if r.user_id == user_id]

    # =========================================================================
    # ACHIEVEMENTS
    # =========================================================================

    def get_user_achievements(self, user_id: int) -> list[Achievement]:
        return [a for a in self._achievements if a.user_id == user_id]

    def add_achievement(
        self,
        user_id: int,
        title: str,
        description: str,
        icon: str,
        color: str,
    ) -> Achievement:
        achievement = Achievement(
            id=self._next_id(),
            user_id=user_id,
            title=title,
            description=description,
            icon=icon,
            color=color,
        )
        self._achievements.append(achievement)
        logger.info("achievement_added", user_id=user_id, title=title)
        return achievement

    # =========================================================================
    # GAMES
    # =========================================================================

    def get_all_games(self) -> list[Game]:
        return list(self._games.values())

    def get_game(self, game_id: int) -> Game | None:
        return self._games.get(game_id)

    def get_user_game_scores(self, user_id: int) -> list[UserGameScore]:
        return [s for s in self._game_scores if s.user_id == user_id]

    def add_game_score(self, user_id: int, game_id: int, score: int) -> UserGameScore:
        """Record a finished round and update the game's play stats.

        Raises:
            RecordNotFoundError: If the game does not exist
        """
        game = self._games.get(game_id)
        if game is None:
            raise RecordNotFoundError("Game", game_id)

        entry = UserGameScore(
            id=self._next_id(),
            user_id=user_id,
            game_id=game_id,
            score=score,
        )
        self._game_scores.append(entry)
        self._games[game_id] = replace(
            game,
            times_played=game.times_played + 1,
            high_score=max(game.high_score, score),
        )

        logger.info(
            "game_score_added",
            user_id=user_id,
            game_id=game_id,
            score=score,
            new_high_score=score > game.high_score,
        )
        return entry

    # =========================================================================
    # DASHBOARD
    # =========================================================================

    def get_user_summary(self, user_id: int) -> UserSummary | None:
        """Aggregate progress, quiz and game stats for the dashboard."""
        user = self._users.get(user_id)
        if user is None:
            return None

        progress = self.get_user_progress(user_id)
        results = self.get_user_quiz_results(user_id)
        correct = sum(1 for r in results if r.is_correct)

        best_scores: dict[int, int] = {}
        for entry in self.get_user_game_scores(user_id):
            best_scores[entry.game_id] = max(best_scores.get(entry.game_id, 0), entry.score)

        average = sum(p.progress for p in progress) / len(progress) if progress else 0.0
        accuracy = correct / len(results) * 100 if results else 0.0

        return UserSummary(
            user_id=user_id,
            topics_total=len(self._topics),
            topics_completed=sum(1 for p in progress if p.completed),
            average_progress=round(average, 1),
            quizzes_answered=len(results),
            quizzes_correct=correct,
            quiz_accuracy=round(accuracy, 1),
            achievements=len(self.get_user_achievements(user_id)),
            total_points=user.total_points,
            streak=user.streak,
            hours_spent=user.time_spent // 60,
            best_scores=best_scores,
        )


# Global storage instance
_storage: MemStorage | None = None


def get_storage() -> MemStorage:
    """Get the global storage instance."""
    global _storage
    if _storage is None:
        _storage = MemStorage()
    return _storage


def reset_storage(seed_data: bool = True) -> MemStorage:
    """Replace the global storage with a freshly seeded one."""
    global _storage
    _storage = MemStorage(seed_data=seed_data)
    return _storage
