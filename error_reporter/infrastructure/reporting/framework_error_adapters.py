"""
Error adapters for Starlette and FastAPI exceptions.

Starlette keeps the message of an HTTPException in ``detail`` and
FastAPI's validation errors carry a list of field errors but no status.
These adapters expose both through the ErrorAdapter port.
"""

from typing import Any, Optional

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from error_reporter.domain.reporting.entities import ErrorProbe
from error_reporter.domain.reporting.ports import ErrorAdapter

HTTP_422 = 422


class HTTPExceptionAdapter(ErrorAdapter):
    """Reads status and message from ``HTTPException.status_code``/``detail``."""

    def probe(self, error: Any) -> Optional[ErrorProbe]:
        if not isinstance(error, StarletteHTTPException):
            return None
        detail = error.detail
        if detail is not None and not isinstance(detail, str):
            detail = str(detail)
        return ErrorProbe(status=error.status_code, message=detail or None)


class RequestValidationErrorAdapter(ErrorAdapter):
    """Reports request validation failures as 422 with a field summary."""

    def probe(self, error: Any) -> Optional[ErrorProbe]:
        if not isinstance(error, RequestValidationError):
            return None
        return ErrorProbe(status=HTTP_422, message=summarize_validation_errors(error))


def summarize_validation_errors(error: RequestValidationError) -> str:
    """One ``location: message`` entry per invalid field, joined with '; '."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        message = item.get("msg", "")
        parts.append(f"{location}: {message}" if location else str(message))
    return "; ".join(parts)


DEFAULT_ADAPTERS = (HTTPExceptionAdapter(), RequestValidationErrorAdapter())
