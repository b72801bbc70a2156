"""
Tests for the ErrorReporter and its ASGI middleware.

Covers the double-handling guard, production handoff, fallback
handlers and the full request cycle through a FastAPI application.
"""

import re
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.responses import HTMLResponse, Response
from starlette.types import Receive, Scope, Send

from error_reporter.domain.reporting.errors import NotFoundError
from error_reporter.interfaces.reporting import ErrorReporter, install_error_reporter
from error_reporter.interfaces.schemas import ErrorResponse
from error_reporter.main import create_app


def _find(pattern: str, text: str) -> str:
    match = re.search(pattern, text)
    assert match, f"{pattern!r} not found"
    return match.group(1).strip()


# =====================================================================
# ErrorReporter
# =====================================================================


class TestErrorReporter:
    """Tests for the four-parameter error-handling stage."""

    @pytest.mark.asyncio
    async def test_started_response_is_handed_off(self, make_request) -> None:
        """No write once headers are out: the raw error goes to next_handler."""
        error = {"status": 404}
        channel = MagicMock(started=True)
        channel.write = AsyncMock()
        next_handler = AsyncMock()

        await ErrorReporter(prod=False)(error, make_request(), channel, next_handler)

        next_handler.assert_awaited_once()
        assert next_handler.await_args.args[0] is error
        channel.write.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_writes_exactly_one_response(self, make_request) -> None:
        channel = MagicMock(started=False)
        channel.write = AsyncMock()
        next_handler = AsyncMock()

        await ErrorReporter(prod=False)("boom", make_request(), channel, next_handler)

        channel.write.assert_awaited_once()
        response = channel.write.await_args.args[0]
        assert response.status_code == 500
        assert response.body == b"Unknown error: boom\n"
        next_handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_html_in_production_is_handed_off(self, make_request) -> None:
        error = NotFoundError()
        channel = MagicMock(started=False)
        channel.write = AsyncMock()
        next_handler = AsyncMock()

        await ErrorReporter(prod=True)(error, make_request("text/html"), channel, next_handler)

        next_handler.assert_awaited_once_with(error)
        channel.write.assert_not_awaited()

    def test_describe_keeps_stack_in_production(self) -> None:
        """The unredacted description stays available to collaborators."""
        reporter = ErrorReporter(prod=True)
        assert reporter.describe({"stack": "frames"}).stack == "frames"


# =====================================================================
# Full application
# =====================================================================


class TestDevelopmentApplication:
    """Error responses of the demo app outside production."""

    @pytest.fixture
    def client(self, dev_settings) -> TestClient:
        return TestClient(create_app(dev_settings))

    def test_not_found_as_plain_text(self, client: TestClient) -> None:
        response = client.get("/doesnotexist")
        assert response.status_code == 404
        assert response.headers["content-type"] == "text/plain; charset=utf-8"
        assert response.text.startswith(
            "HTTPException: Not Found\nTraceback (most recent call last):"
        )

    def test_not_found_as_json(self, client: TestClient) -> None:
        response = client.get("/doesnotexist", headers={"Accept": "application/json"})
        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        body = ErrorResponse.model_validate(response.json())
        assert body.statusCode == 404
        assert body.name == "HTTPException"
        assert body.message == "Not Found"
        assert "Traceback" in body.stack

    def test_manual_error_as_html(self, client: TestClient) -> None:
        response = client.get("/demo/error", headers={"Accept": "text/html"})
        assert response.status_code == 501
        assert response.headers["content-type"].startswith("text/html")
        assert _find(r'<h4 class="error-name">(.+)</h4>', response.text) == "NotImplementedHttpError"
        assert _find(r'<h2 class="error-message">(.+)</h2>', response.text) == "Not Implemented"

    def test_json_preferred_over_html(self, client: TestClient) -> None:
        response = client.get(
            "/demo/error", headers={"Accept": "text/html, application/json"}
        )
        assert response.headers["content-type"] == "application/json"
        assert response.json()["statusCode"] == 501

    def test_status_and_message_from_route(self, client: TestClient) -> None:
        response = client.get("/demo/status/409", params={"message": "Already exists"})
        assert response.status_code == 409
        assert response.text.startswith("HttpError: Already exists\n")

    def test_out_of_range_status_becomes_500(self, client: TestClient) -> None:
        response = client.get("/demo/status/302", headers={"Accept": "application/json"})
        assert response.status_code == 500
        assert response.json()["name"] == "HttpError"

    def test_unexpected_error(self, client: TestClient) -> None:
        response = client.get("/demo/crash", headers={"Accept": "application/json"})
        assert response.status_code == 500
        body = response.json()
        assert body["name"] == "RuntimeError"
        assert body["message"] == "Something went wrong"

    def test_validation_error(self, client: TestClient) -> None:
        response = client.get("/demo/status/abc", headers={"Accept": "application/json"})
        assert response.status_code == 422
        body = response.json()
        assert body["name"] == "RequestValidationError"
        assert "path.status_code" in body["message"]


class TestProductionApplication:
    """Error responses of the demo app in production posture."""

    @pytest.fixture
    def client(self, prod_settings) -> TestClient:
        return TestClient(create_app(prod_settings), raise_server_exceptions=False)

    def test_json_has_no_stack(self, client: TestClient) -> None:
        response = client.get("/demo/error", headers={"Accept": "application/json"})
        assert response.status_code == 501
        assert response.json() == {
            "statusCode": 501,
            "name": "NotImplementedHttpError",
            "message": "Not Implemented",
            "stack": "",
        }

    def test_text_has_no_stack(self, client: TestClient) -> None:
        response = client.get("/doesnotexist")
        assert response.status_code == 404
        assert response.text == "HTTPException: Not Found\n"

    def test_html_handoff_keeps_status(self, client: TestClient) -> None:
        """Without a fallback the handoff answers with the error's own status."""
        response = client.get("/demo/error", headers={"Accept": "text/html"})
        assert response.status_code == 501
        assert response.headers["content-type"] == "text/plain; charset=utf-8"
        assert response.text == "Not Implemented"
        assert "error-name" not in response.text

    def test_html_handoff_for_unknown_path(self, client: TestClient) -> None:
        response = client.get("/doesnotexist", headers={"Accept": "text/html"})
        assert response.status_code == 404
        assert response.text == "Not Found"


# =====================================================================
# Middleware wiring
# =====================================================================


class _BrokenResponse(Response):
    """Sends its headers, then fails before the body."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await send({"type": "http.response.start", "status": 200, "headers": []})
        raise RuntimeError("stream broke")


def _app_with_reporter(prod: bool, fallback=None) -> FastAPI:
    app = FastAPI()
    install_error_reporter(app, ErrorReporter(prod=prod), fallback=fallback)

    @app.get("/missing")
    def missing() -> None:
        raise NotFoundError("No such page")

    @app.get("/stream")
    def stream() -> Response:
        return _BrokenResponse()

    return app


class TestMiddleware:
    """Tests for ErrorReporterMiddleware and install_error_reporter."""

    def test_fallback_receives_raw_error_in_production(self) -> None:
        received = []

        async def branded_page(request, error):
            received.append(error)
            return HTMLResponse("<h1>Sorry</h1>", status_code=404)

        client = TestClient(_app_with_reporter(prod=True, fallback=branded_page))
        response = client.get("/missing", headers={"Accept": "text/html"})

        assert response.status_code == 404
        assert response.text == "<h1>Sorry</h1>"
        assert len(received) == 1
        assert isinstance(received[0], NotFoundError)
        assert received[0].message == "No such page"

    def test_fallback_unused_for_other_formats(self) -> None:
        fallback = AsyncMock()
        client = TestClient(_app_with_reporter(prod=True, fallback=fallback))
        response = client.get("/missing", headers={"Accept": "application/json"})
        assert response.json()["message"] == "No such page"
        fallback.assert_not_awaited()

    def test_handoff_without_fallback_keeps_status(self) -> None:
        client = TestClient(_app_with_reporter(prod=True))
        response = client.get("/missing", headers={"Accept": "text/html"})
        assert response.status_code == 404
        assert response.text == "Not Found"

    def test_started_response_is_not_written_again(self) -> None:
        fallback = AsyncMock()
        client = TestClient(_app_with_reporter(prod=False, fallback=fallback))
        with pytest.raises(RuntimeError, match="stream broke"):
            client.get("/stream")
        fallback.assert_not_awaited()
