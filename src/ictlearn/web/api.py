"""FastAPI application factory.

Main entry point for the ICT Learning Hub Web API.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from ictlearn import __version__
from ictlearn.config.app_config import AppConfig, load_app_config
from ictlearn.core.storage import get_storage, reset_storage
from ictlearn.web.routes import (
    health_router,
    users_router,
    topics_router,
    progress_router,
    quizzes_router,
    achievements_router,
    games_router,
    tools_router,
    practice_router,
)
from ictlearn.web.schemas import DEFAULT_INVALID_REQUEST, INVALID_REQUEST_KEY

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan context manager for startup/shutdown events."""
    storage = get_storage()
    logger.info(
        "api_startup",
        version=__version__,
        topics=len(storage.get_all_topics()),
        games=len(storage.get_all_games()),
    )
    yield
    logger.info("api_shutdown")


def _invalid_request_message(request: Request) -> str:
    """The 400 message declared on the matched route, if any."""
    endpoint = request.scope.get("endpoint")
    for route in request.app.routes:
        if isinstance(route, APIRoute) and route.endpoint is endpoint:
            return (route.openapi_extra or {}).get(INVALID_REQUEST_KEY, DEFAULT_INVALID_REQUEST)
    return DEFAULT_INVALID_REQUEST


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed requests with 400 instead of 422."""
    logger.info(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": _invalid_request_message(request),
            "errors": [
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
                for e in exc.errors()
            ],
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer 500."""
    logger.error(
        "unhandled_error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Settings to use (defaults to load_app_config())

    Returns:
        Configured FastAPI app instance
    """
    config = config or load_app_config()

    if not config.seed_demo_data:
        reset_storage(seed_data=False)

    app = FastAPI(
        title="ICT Learning Hub API",
        description="Progress, quizzes, achievements and games for the ICT Learning Hub",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware for the browser client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(topics_router)
    app.include_router(progress_router)
    app.include_router(quizzes_router)
    app.include_router(achievements_router)
    app.include_router(games_router)
    app.include_router(tools_router)
    app.include_router(practice_router)

    return app


# Default app instance for uvicorn
app = create_app()
