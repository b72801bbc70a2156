"""
Format dispatcher for normalized exceptions.

Writes a NormalizedException as JSON, plain text or an HTML diagnostic
page. The HTML page is never produced in production: the dispatcher
returns None instead and the caller hands the error on.
"""

import logging
from typing import Optional, Sequence

from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from error_reporter.application.reporting.negotiation import select_response_format
from error_reporter.domain.reporting.entities import NormalizedException, ResponseFormat
from error_reporter.domain.reporting.ports import LinkDecorator, PageRenderer
from error_reporter.domain.reporting.status_codes import reason_phrase

logger = logging.getLogger(__name__)


def format_text(exc: NormalizedException) -> str:
    """Plain-text body: ``<name>: <message>`` then the stack on the next line."""
    return f"{exc.name}: {exc.message}\n{exc.stack}"


def status_response(exc: NormalizedException) -> Response:
    """Minimal response carrying only the status and its reason phrase."""
    return PlainTextResponse(reason_phrase(exc.status), status_code=exc.status)


def text_response(exc: NormalizedException) -> Response:
    return PlainTextResponse(format_text(exc), status_code=exc.status)


def json_response(exc: NormalizedException) -> Response:
    return JSONResponse(exc.to_dict(), status_code=exc.status)


async def html_response(
    exc: NormalizedException,
    request: Request,
    renderer: PageRenderer,
    links: Sequence[LinkDecorator],
) -> Response:
    """Render the diagnostic page, falling back to plain text on failure.

    The response is only built once rendering has fully completed.
    """
    try:
        html = await renderer.render(exc, request, links)
    except Exception:
        logger.warning(
            "Diagnostic page rendering failed for %s (%d), sending plain text",
            exc.name,
            exc.status,
            exc_info=True,
        )
        return text_response(exc)
    return HTMLResponse(html, status_code=exc.status)


async def dispatch(
    exc: NormalizedException,
    request: Request,
    *,
    prod: bool,
    renderer: PageRenderer,
    links: Sequence[LinkDecorator] = (),
) -> Optional[Response]:
    """Build the response reporting ``exc`` in the client's preferred format.

    Args:
        exc: The exception to report, already redacted for ``prod``.
        request: The request that failed. Its Accept header drives the format.
        prod: Whether the service runs in production posture.
        renderer: Renderer for the HTML diagnostic page.
        links: Link decorators forwarded to the renderer.

    Returns:
        The response to send, or None when HTML was requested in
        production and another handler must produce the output.
    """
    response_format = select_response_format(request.headers.get("accept"))
    logger.debug(
        "Reporting %s (%d) as %s", exc.name, exc.status, response_format.value
    )

    if response_format is ResponseFormat.JSON:
        return json_response(exc)
    if response_format is ResponseFormat.HTML:
        if prod:
            return None
        return await html_response(exc, request, renderer, links)
    return text_response(exc)
