"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from discuss.application.job.reaper import CommentReaper
from discuss.config import ReaperSettings, Settings
from discuss.interface.api.routes import (
    auth,
    comments,
    health,
    notifications,
    realtime,
)
from discuss.util.di import build_container
from discuss.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the comment reaper while the app serves requests.

    On shutdown the reaper is stopped and the DI container closed, which
    closes open WebSocket sessions and disposes the database engine.
    """
    container: AsyncContainer = app.state.dishka_container
    reaper = CommentReaper(container, await container.get(ReaperSettings))
    app.state.reaper = reaper
    reaper.start()
    try:
        yield
    finally:
        await reaper.stop()
        await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (tests pass one built from mocks).
            Defaults to the production container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Discuss API",
        description="Threaded comments with edit/restore windows and real-time notifications",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_dishka(container or build_container(), app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(realtime.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
