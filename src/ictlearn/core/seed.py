"""Demo data loaded into a fresh store.

One student account, the six topics of the course, a starter quiz bank,
three earned achievements and the three browser games.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from ictlearn.core.models import Achievement, Game, Quiz, Topic, User, utcnow

DEFAULT_USER_ID = 1

# (topic_id, progress) for the demo user
DEMO_PROGRESS: list[tuple[int, int]] = [
    (1, 75),
    (2, 45),
    (3, 20),
    (4, 65),
    (5, 30),
    (6, 15),
]


def seed_users() -> list[User]:
    return [
        User(
            id=DEFAULT_USER_ID,
            username="student",
            email="student@example.com",
            level=5,
            total_points=1250,
            streak=7,
            time_spent=720,  # 12 hours
            completed_topics=3,
        ),
    ]


def seed_topics() -> list[Topic]:
    return [
        Topic(
            id=1,
            title="Number Systems",
            description="Learn binary, decimal, hexadecimal conversions with interactive games and visual tools.",
            difficulty="Basic",
            duration=45,
            rating=48,
            icon="calculator",
            gradient="from-electric-blue to-purple",
        ),
        Topic(
            id=2,
            title="IP Addressing",
            description="Master IPv4 and IPv6 addressing with practical examples and subnet calculators.",
            difficulty="Intermediate",
            duration=60,
            rating=49,
            icon="network-wired",
            gradient="from-emerald to-electric-blue",
        ),
        Topic(
            id=3,
            title="Subnetting",
            description="Practice subnet calculations with visual network diagrams and interactive tools.",
            difficulty="Advanced",
            duration=90,
            rating=47,
            icon="sitemap",
            gradient="from-purple to-orange",
            is_locked=True,
            prerequisite_id=2,
        ),
        Topic(
            id=4,
            title="Logic Gates",
            description="Build circuits with AND, OR, NOT gates through drag-and-drop simulation tools.",
            difficulty="Basic",
            duration=50,
            rating=48,
            icon="microchip",
            gradient="from-orange to-emerald",
        ),
        Topic(
            id=5,
            title="Basic Programming",
            description="Learn programming fundamentals with Python through interactive coding challenges.",
            difficulty="Beginner",
            duration=120,
            rating=49,
            icon="code",
            gradient="from-purple to-electric-blue",
        ),
        Topic(
            id=6,
            title="Mixed Challenges",
            description="Test your knowledge across all topics with challenging puzzles and brain teasers.",
            difficulty="Fun",
            duration=30,
            rating=46,
            icon="puzzle-piece",
            gradient="from-emerald to-orange",
        ),
    ]


def seed_quizzes() -> list[Quiz]:
    return [
        Quiz(
            id=1,
            topic_id=1,
            question="What is the decimal equivalent of binary 1010?",
            options=["8", "10", "12", "16"],
            correct_answer=1,
            difficulty="Basic",
        ),
        Quiz(
            id=2,
            topic_id=1,
            question="Convert hexadecimal FF to decimal:",
            options=["255", "256", "254", "257"],
            correct_answer=0,
            difficulty="Basic",
        ),
        Quiz(
            id=3,
            topic_id=2,
            question="What class does IP address 192.168.1.1 belong to?",
            options=["Class A", "Class B", "Class C", "Class D"],
            correct_answer=2,
            difficulty="Intermediate",
        ),
    ]


def seed_achievements(now: datetime | None = None) -> list[Achievement]:
    now = now or utcnow()
    return [
        Achievement(
            id=1,
            user_id=DEFAULT_USER_ID,
            title="Binary Master",
            description="Completed all number systems challenges",
            icon="medal",
            color="emerald",
            earned_at=now - timedelta(days=2),
        ),
        Achievement(
            id=2,
            user_id=DEFAULT_USER_ID,
            title="Speed Demon",
            description="Completed 10 quizzes in perfect time",
            icon="lightning-bolt",
            color="electric-blue",
            earned_at=now - timedelta(days=7),
        ),
        Achievement(
            id=3,
            user_id=DEFAULT_USER_ID,
            title="Logic Wizard",
            description="Built complex circuits with logic gates",
            icon="code",
            color="purple",
            earned_at=now - timedelta(days=7),
        ),
    ]


def seed_games() -> list[Game]:
    return [
        Game(
            id=1,
            title="Binary Race",
            description="Convert numbers as fast as you can in this thrilling race against time!",
            type="Binary Race",
            high_score=2450,
            times_played=127,
            gradient="from-electric-blue to-purple",
            icon="dice",
        ),
        Game(
            id=2,
            title="Network Builder",
            description="Design and configure networks by dragging and connecting devices!",
            type="Network Builder",
            times_played=89,
            gradient="from-emerald to-electric-blue",
            icon="network-wired",
        ),
        Game(
            id=3,
            title="Logic Puzzle",
            description="Solve complex logic gate circuits by connecting the right components!",
            type="Logic Puzzle",
            times_played=156,
            gradient="from-purple to-orange",
            icon="puzzle-piece",
        ),
    ]
