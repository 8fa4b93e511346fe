"""Route handlers for the Web API."""

from ictlearn.web.routes.health import router as health_router
from ictlearn.web.routes.users import router as users_router
from ictlearn.web.routes.topics import router as topics_router
from ictlearn.web.routes.progress import router as progress_router
from ictlearn.web.routes.quizzes import router as quizzes_router
from ictlearn.web.routes.achievements import router as achievements_router
from ictlearn.web.routes.games import router as games_router
from ictlearn.web.routes.tools import router as tools_router
from ictlearn.web.routes.practice import router as practice_router

__all__ = [
    "health_router",
    "users_router",
    "topics_router",
    "progress_router",
    "quizzes_router",
    "achievements_router",
    "games_router",
    "tools_router",
    "practice_router",
]
