"""
Application factory for creating FastAPI app instances.

This module provides functions for creating and configuring the FastAPI application
with all necessary middleware, routers, and exception handlers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from core import get_logger, get_settings

logger = get_logger("AppFactory")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the failure and answer 500 without leaking details."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    from fastapi.middleware.cors import CORSMiddleware
    from infrastructure.database import close_db, init_db
    from routers import decks, flashcards, folders, health

    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for application startup and shutdown."""
        logger.info("Application startup...")
        await init_db()
        logger.info("Application startup complete")

        yield

        logger.info("Application shutdown...")
        await close_db()
        logger.info("Application shutdown complete")

    app = FastAPI(title="Flashcard Library API", lifespan=lifespan)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    allowed_origins = settings.get_cors_origins()
    logger.info(f"CORS allowed origins: {allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(folders.router, prefix="/api/folders", tags=["Folders"])
    app.include_router(decks.router, prefix="/api/decks", tags=["Decks"])
    app.include_router(flashcards.router, prefix="/api/flashcards", tags=["Flashcards"])

    return app
