"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from conduit.config import Settings
from conduit.interface.api.error_handlers import register_error_handlers
from conduit.interface.api.routes import articles, comments, favorites, health, users
from conduit.util.di.container import create_container, setup_di
from conduit.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use; defaults to the production container
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Conduit API",
        description="Backend API for Conduit - a blogging platform with articles, comments, tags and favorites",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    for module in (users, articles, comments, favorites):
        app_instance.include_router(module.router, prefix=settings.api.prefix)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
