"""
HTTP interface of the reporting bounded context.

The ErrorReporter, the format dispatcher and the ASGI middleware
wiring them into a FastAPI application.
"""

from error_reporter.interfaces.reporting.middleware import (
    ErrorReporterMiddleware,
    install_error_reporter,
)
from error_reporter.interfaces.reporting.reporter import ErrorReporter

__all__ = ["ErrorReporter", "ErrorReporterMiddleware", "install_error_reporter"]
