"""
Demo router.

Endpoints that fail on purpose, to show every error format the
reporter produces.
"""

from fastapi import APIRouter, Query

from error_reporter.domain.reporting.errors import HttpError, NotImplementedHttpError
from error_reporter.interfaces.schemas import ErrorResponse

router = APIRouter(
    prefix="/demo",
    tags=["demo"],
    responses={"4XX": {"model": ErrorResponse}, "5XX": {"model": ErrorResponse}},
)


@router.get(
    "/error",
    summary="Not implemented",
    description="Always fails with 501 Not Implemented.",
)
def not_implemented() -> None:
    raise NotImplementedHttpError()


@router.get(
    "/status/{status_code}",
    summary="Fail with a status",
    description="Fails with the requested HTTP status and optional message.",
)
def fail_with_status(status_code: int, message: str | None = Query(None)) -> None:
    raise HttpError(status_code, message)


@router.get(
    "/crash",
    summary="Unexpected error",
    description="Raises an error that carries no HTTP status.",
)
def crash() -> None:
    raise RuntimeError("Something went wrong")
