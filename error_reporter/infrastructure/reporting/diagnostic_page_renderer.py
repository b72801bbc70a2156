"""
Diagnostic page renderer.

Generates a standalone HTML page describing an exception: name, message,
status, stack frames with surrounding source lines, and the request that
failed. Source files are read off the event loop.
Implements the PageRenderer port.
"""

import asyncio
import html
import itertools
import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from error_reporter.domain.reporting.entities import LinkContext, NormalizedException
from error_reporter.domain.reporting.ports import LinkDecorator, PageRenderer

logger = logging.getLogger(__name__)

CONTEXT_LINES = 5
MAX_FRAMES = 30

FRAME_PATTERN = re.compile(r'^\s*File "(?P<path>[^"]+)", line (?P<line>\d+), in (?P<func>.+)$')

PAGE_STYLE = """
body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
       margin: 0; background: #f5f6f8; color: #1f2933; }
header { background: #1f2933; color: #fff; padding: 1.5rem 2rem; }
.status { display: inline-block; background: #e11d48; border-radius: 4px;
          padding: 0.15rem 0.6rem; font-weight: 600; }
.error-name { margin: 0.75rem 0 0.25rem; font-weight: 400; color: #cbd2d9; }
.error-message { margin: 0; }
.error-links a { color: #93c5fd; margin-right: 1rem; }
section { background: #fff; margin: 1.5rem 2rem; padding: 1rem 1.5rem;
          border-radius: 6px; box-shadow: 0 1px 2px rgba(0,0,0,0.08); }
.frame-title { font-family: monospace; font-weight: 600; }
pre { background: #f0f2f5; padding: 0.75rem; overflow-x: auto; font-size: 0.85rem; }
.line-current { background: #fde68a; display: block; }
table { border-collapse: collapse; font-family: monospace; font-size: 0.85rem; }
td { padding: 0.2rem 0.75rem; vertical-align: top; }
"""


@dataclass
class StackFrame:
    """One ``File ..., line ..., in ...`` entry of a Python traceback."""

    path: str
    line: int
    function: str
    context: list[tuple[int, str]] = field(default_factory=list)


def parse_frames(stack: str) -> list[StackFrame]:
    """Extract the frames of a formatted traceback, innermost first."""
    frames = []
    for raw in stack.splitlines():
        match = FRAME_PATTERN.match(raw)
        if match:
            frames.append(
                StackFrame(
                    path=match.group("path"),
                    line=int(match.group("line")),
                    function=match.group("func").strip(),
                )
            )
    frames.reverse()
    return frames[:MAX_FRAMES]


def read_context(path: str, line: int, radius: int = CONTEXT_LINES) -> list[tuple[int, str]]:
    """Return the numbered source lines around ``line``, or [] if unreadable.

    Paths come from stack text, so only regular files are opened and only
    the lines up to ``line + radius`` are read.
    """
    if line < 1 or not os.path.isfile(path):
        return []
    start = max(line - radius, 1)
    try:
        with open(path, encoding="utf-8", errors="replace") as source:
            window = itertools.islice(source, start - 1, line + radius)
            return [
                (number, text.rstrip("\r\n"))
                for number, text in enumerate(window, start=start)
            ]
    except OSError:
        return []


class DiagnosticPageRenderer(PageRenderer):
    """Renders exceptions as self-contained HTML pages.

    No external assets: styles are embedded so the page works offline.
    """

    def __init__(self, context_lines: int = CONTEXT_LINES) -> None:
        self._context_lines = context_lines

    async def render(
        self,
        exception: NormalizedException,
        request: Any,
        links: Sequence[LinkDecorator] = (),
    ) -> str:
        frames = parse_frames(exception.stack)
        contexts = await asyncio.gather(
            *(
                asyncio.to_thread(read_context, frame.path, frame.line, self._context_lines)
                for frame in frames
            )
        )
        for frame, context in zip(frames, contexts):
            frame.context = context

        link_context = LinkContext(message=exception.message)
        links_html = "".join(decorate(link_context) for decorate in links)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{html.escape(exception.name)}: {html.escape(exception.message)}</title>
<style>{PAGE_STYLE}</style>
</head>
<body>
<header>
    <span class="status">{exception.status}</span>
    <h4 class="error-name">{html.escape(exception.name)}</h4>
    <h2 class="error-message">{html.escape(exception.message)}</h2>
    <div class="error-links">{links_html}</div>
</header>
{self._render_frames(frames, exception.stack)}
{self._render_request(request)}
</body>
</html>
"""

    @staticmethod
    def _render_line(number: int, text: str, current: bool) -> str:
        css_class = "line-current" if current else "line"
        return f'<span class="{css_class}">{number:>5}  {html.escape(text)}</span>\n'

    def _render_frames(self, frames: list[StackFrame], stack: str) -> str:
        if not frames:
            if not stack:
                return ""
            return f"""<section class="stack"><h3>Stack</h3><pre>{html.escape(stack)}</pre></section>"""

        rendered = []
        for frame in frames:
            source = "".join(
                self._render_line(number, text, number == frame.line)
                for number, text in frame.context
            )
            source_html = f"<pre>{source}</pre>" if source else ""
            rendered.append(
                f"""<div class="frame">
    <div class="frame-title">{html.escape(frame.function)}</div>
    <div class="frame-location">{html.escape(frame.path)}:{frame.line}</div>
    {source_html}
</div>"""
            )
        frames_html = "".join(rendered)
        return f"""<section class="stack"><h3>Stack</h3>{frames_html}</section>"""

    def _render_request(self, request: Optional[Any]) -> str:
        if request is None:
            return ""
        try:
            method = str(request.method)
            url = str(request.url)
            headers = list(request.headers.items())
        except Exception:
            logger.debug("Request details unavailable for diagnostic page", exc_info=True)
            return ""

        rows = "".join(
            f"<tr><td>{html.escape(name)}</td><td>{html.escape(value)}</td></tr>"
            for name, value in headers
        )
        return f"""<section class="request">
    <h3>Request</h3>
    <div class="frame-title">{html.escape(method)} {html.escape(url)}</div>
    <table>{rows}</table>
</section>"""
