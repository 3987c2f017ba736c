"""FastAPI application."""

from pathlib import Path

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from confess.config import Settings
from confess.interface.api.routes import confessions, health, reactions
from confess.util.di.container import create_container, setup_di
from confess.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Confessions API",
        description="Backend API for sharing anonymous confessions and reacting to them",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(confessions.router)
    app_instance.include_router(reactions.router)

    # Frontend assets; mounted last so API routes take precedence
    if Path(settings.static_dir).is_dir():
        app_instance.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
