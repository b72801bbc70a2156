"""
Error reporter.

The error-handling stage of a request: receives the raw error, the
request, the response channel and a continuation, and turns the error
into exactly one response (or hands it to the continuation).

Pipeline per error: normalize -> redact -> dispatch.
"""

import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from starlette.requests import Request
from starlette.responses import Response

from error_reporter.domain.reporting.entities import NormalizedException
from error_reporter.domain.reporting.normalizer import normalize
from error_reporter.domain.reporting.ports import ErrorAdapter, LinkDecorator, PageRenderer
from error_reporter.domain.reporting.redactor import redact
from error_reporter.infrastructure.reporting.diagnostic_page_renderer import (
    DiagnosticPageRenderer,
)
from error_reporter.infrastructure.reporting.framework_error_adapters import (
    DEFAULT_ADAPTERS,
)
from error_reporter.interfaces.reporting.channel import ResponseChannel
from error_reporter.interfaces.reporting.dispatcher import dispatch

logger = logging.getLogger(__name__)

NextHandler = Callable[[Any], Awaitable[None]]


class ErrorReporter:
    """Reports errors to clients as JSON, plain text or an HTML page.

    Args:
        prod: Production posture. Stack traces are stripped and the HTML
            diagnostic page is disabled when True.
        links: Link decorators appended to the diagnostic page, in order.
        renderer: Renderer for the diagnostic page.
        adapters: Extractors for application-specific error types. Defaults
            to the Starlette/FastAPI adapters.
    """

    def __init__(
        self,
        prod: bool,
        links: Sequence[LinkDecorator] = (),
        renderer: Optional[PageRenderer] = None,
        adapters: Optional[Sequence[ErrorAdapter]] = None,
    ) -> None:
        self.prod = prod
        self.links = tuple(links)
        self.renderer = renderer if renderer is not None else DiagnosticPageRenderer()
        self.adapters = tuple(adapters) if adapters is not None else DEFAULT_ADAPTERS

    def describe(self, error: Any) -> NormalizedException:
        """Full, unredacted description of ``error``."""
        return normalize(error, self.adapters)

    async def report(self, error: Any, request: Request) -> Optional[Response]:
        """Build the response for ``error``, or None to hand it off."""
        exc = redact(self.describe(error), self.prod)
        return await dispatch(
            exc,
            request,
            prod=self.prod,
            renderer=self.renderer,
            links=self.links,
        )

    async def __call__(
        self,
        error: Any,
        request: Request,
        channel: ResponseChannel,
        next_handler: NextHandler,
    ) -> None:
        """Handle one error event.

        Args:
            error: The raw error value, left unchanged.
            request: The request being served.
            channel: Where the response is written.
            next_handler: Continuation receiving ``error`` when this
                reporter does not write the response itself.
        """
        if channel.started:
            logger.info(
                "Response already started for %s %s, handing off %s",
                request.method,
                request.url.path,
                type(error).__name__,
            )
            await next_handler(error)
            return

        response = await self.report(error, request)
        if response is None:
            logger.info(
                "No diagnostic page in production for %s %s, handing off",
                request.method,
                request.url.path,
            )
            await next_handler(error)
            return

        await channel.write(response)
