"""
Health check router.

Liveness/readiness probe. Also reports the error-reporting posture the
application was built with, so operators can check that production
deployments really hide stack traces.
"""

from fastapi import APIRouter, Request

from error_reporter.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, version and error-reporting posture.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    app_settings = request.app.state.settings
    return HealthResponse(
        status="ok",
        version=app_settings.version,
        production=app_settings.is_production,
    )
