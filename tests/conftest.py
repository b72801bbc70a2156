"""
Shared fixtures for the error reporter test suite.
"""

from typing import Callable, Optional

import pytest
from starlette.requests import Request

from error_reporter.core.config import Settings


def build_request(accept: Optional[str] = None, path: str = "/failing") -> Request:
    """Build a bare Starlette request, optionally with an Accept header."""
    headers = [(b"host", b"testserver")]
    if accept is not None:
        headers.append((b"accept", accept.encode("latin-1")))
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
        "path": path,
        "raw_path": path.encode("latin-1"),
        "query_string": b"",
        "headers": headers,
    }
    return Request(scope)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    return build_request


@pytest.fixture
def dev_settings() -> Settings:
    return Settings(environment="development", reporter_prod=None, reporter_links_enabled=False)


@pytest.fixture
def prod_settings() -> Settings:
    return Settings(environment="production", reporter_prod=None, reporter_links_enabled=False)
