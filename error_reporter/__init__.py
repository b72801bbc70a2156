"""
Error Reporter — error normalization and format-negotiated error responses
for FastAPI/Starlette applications.

Package root. Layers follow ports & adapters:
    - domain: Normalization, redaction, entities, ports, errors. No framework.
    - application: Response format negotiation.
    - infrastructure: Framework error adapters, HTML diagnostic page, links.
    - interfaces: ErrorReporter, dispatcher, ASGI middleware, routers.
    - shared: Cross-cutting concerns (logging).

Typical use:

    from error_reporter import ErrorReporter, install_error_reporter

    install_error_reporter(app, ErrorReporter(prod=settings.is_production))
"""

from error_reporter.domain.reporting.entities import NormalizedException
from error_reporter.domain.reporting.normalizer import normalize
from error_reporter.domain.reporting.redactor import redact
from error_reporter.interfaces.reporting import (
    ErrorReporter,
    ErrorReporterMiddleware,
    install_error_reporter,
)

__all__ = [
    "ErrorReporter",
    "ErrorReporterMiddleware",
    "NormalizedException",
    "install_error_reporter",
    "normalize",
    "redact",
]
