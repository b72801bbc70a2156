"""
ASGI middleware routing unhandled errors to the ErrorReporter.

Pure ASGI rather than BaseHTTPMiddleware: the reporter needs to see
whether ``http.response.start`` already went out.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from error_reporter.interfaces.reporting.channel import ResponseChannel
from error_reporter.interfaces.reporting.dispatcher import status_response
from error_reporter.interfaces.reporting.reporter import ErrorReporter

logger = logging.getLogger(__name__)

FallbackHandler = Callable[[Request, Any], Awaitable[Response]]


class ErrorReporterMiddleware:
    """Middleware reporting every exception raised by the wrapped app.

    When the reporter hands an error off before anything was sent,
    ``fallback`` produces the response if one is configured; otherwise a
    bare reason-phrase response with the error's own status is sent.
    Once the response has started the error is re-raised unchanged.
    """

    def __init__(
        self,
        app: ASGIApp,
        reporter: ErrorReporter,
        fallback: Optional[FallbackHandler] = None,
    ) -> None:
        self.app = app
        self.reporter = reporter
        self.fallback = fallback

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        channel = ResponseChannel(scope, receive, send)
        try:
            await self.app(scope, receive, channel.send)
        except Exception as exc:
            request = Request(scope, receive)

            async def next_handler(error: Any) -> None:
                if channel.started:
                    raise error
                if self.fallback is not None:
                    response = await self.fallback(request, error)
                else:
                    response = status_response(self.reporter.describe(error))
                await channel.write(response)

            await self.reporter(exc, request, channel, next_handler)


async def forward_to_reporter(_request: Request, exc: Exception) -> Response:
    """Exception handler passing framework errors on to ErrorReporterMiddleware."""
    raise exc


def install_error_reporter(
    app: FastAPI,
    reporter: ErrorReporter,
    fallback: Optional[FallbackHandler] = None,
) -> None:
    """Make ``reporter`` responsible for every error response of ``app``.

    FastAPI's default handlers for HTTPException and request validation
    errors are replaced by forward_to_reporter so those errors reach the
    reporter as well.
    Must be called before the application serves its first request.

    Args:
        app: The FastAPI application instance.
        reporter: The configured error reporter.
        fallback: Handler producing the response when the reporter hands
            an error off, e.g. a branded error page in production.
    """
    app.add_exception_handler(StarletteHTTPException, forward_to_reporter)
    app.add_exception_handler(RequestValidationError, forward_to_reporter)
    app.add_middleware(ErrorReporterMiddleware, reporter=reporter, fallback=fallback)
    logger.debug("Error reporter installed (prod=%s)", reporter.prod)
