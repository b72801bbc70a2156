"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, demo)
- Error reporter (normalization, redaction, format negotiation)
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from error_reporter.core.config import Settings, settings
from error_reporter.infrastructure.reporting.links import stackoverflow_link
from error_reporter.interfaces.demo.router import router as demo_router
from error_reporter.interfaces.health import router as health_router
from error_reporter.interfaces.reporting import ErrorReporter, install_error_reporter
from error_reporter.shared.logging import configure_logging


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and the error reporter.
    This is the composition root of the application: the only place
    where the production posture is read from configuration.

    Args:
        app_settings: Settings to build the app with. Defaults to the
            settings loaded from the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(
        level=app_settings.log_level,
        reporter_level=app_settings.reporter_log_level,
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )
    app.state.settings = app_settings

    # --- Error Reporting ---
    links = [stackoverflow_link] if app_settings.reporter_links_enabled else []
    reporter = ErrorReporter(prod=app_settings.is_production, links=links)
    install_error_reporter(app, reporter)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(demo_router)

    return app


app = create_app()
