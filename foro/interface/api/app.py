"""FastAPI application factory."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from foro.config import Settings
from foro.interface.api.routes import health, posts
from foro.util.di.container import create_container, setup_di
from foro.util.observability import instrument_fastapi


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Build the posts API.

    Logfire should already be configured; ``scripts/start_app.py`` does it
    before uvicorn calls this factory.

    Args:
        container: DI container (defaults to the production container)
        settings: Application settings (defaults to loading from environment)

    Returns:
        Configured application
    """
    settings = settings or Settings()
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Disposes the database engine, if one was opened
        await container.close()
        logfire.info("Container closed")

    app = FastAPI(
        title="Foro API",
        description="Posts with authors, tags and images; soft delete and restore",
        version="0.1.0",
        lifespan=lifespan,
    )

    if settings.observability.instrument:
        instrument_fastapi(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
        max_age=600,
    )

    setup_di(app, container)

    app.include_router(health.router)
    app.include_router(posts.router)

    return app
