"""Unit tests for the WitsShell client HTTP utilities.

This module tests the HTTP handling layer defined in client/_http.py.
The tests verify:

1. Helper Functions:
   - _parse_error_response: Extracting error info from response bodies
   - _raise_for_status: Mapping HTTP status codes to exception types
   - _calculate_backoff: Exponential backoff calculation for retries

2. HTTPClient and AsyncHTTPClient:
   - Initialization and context manager support
   - Request methods (GET, POST, DELETE)
   - Error mapping and retry behavior
   - Query parameter filtering

Note: These tests use httpx's mock transport to avoid real network calls.
"""

import json

import httpx
import pytest

from client._http import (
    DEFAULT_RETRY_BACKOFF_BASE,
    DEFAULT_RETRY_BACKOFF_MAX,
    RETRYABLE_STATUS_CODES,
    AsyncHTTPClient,
    HTTPClient,
    _calculate_backoff,
    _parse_error_response,
    _raise_for_status,
)
from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)


@pytest.fixture
def no_sleep(monkeypatch):
    """Make retry backoff instantaneous and record the requested delays."""
    delays = []
    monkeypatch.setattr("client._http.time.sleep", delays.append)
    return delays


# =============================================================================
# Helper Function Tests: _parse_error_response
# =============================================================================


class TestParseErrorResponse:
    def test_detail_string(self) -> None:
        response = httpx.Response(400, json={"detail": "Path '/x' is not a directory"})

        message, error_type, details = _parse_error_response(response)

        assert message == "Path '/x' is not a directory"
        assert error_type is None
        assert details == {"detail": "Path '/x' is not a directory"}

    def test_app_error_body(self) -> None:
        body = {
            "error": "Path Not Found",
            "detail": "The path '/x' does not exist",
            "requested_path": "/x",
        }
        response = httpx.Response(404, json=body)

        message, error_type, details = _parse_error_response(response)

        assert message == "The path '/x' does not exist"
        assert error_type == "Path Not Found"
        assert details["requested_path"] == "/x"

    def test_validation_list(self) -> None:
        errors = [{"loc": ["body", "line"], "msg": "Field required", "type": "missing"}]
        response = httpx.Response(422, json={"detail": errors})

        message, error_type, details = _parse_error_response(response)

        assert message == "line: Field required"
        assert error_type == "validation_error"
        assert details == {"errors": errors}

    def test_plain_text(self) -> None:
        response = httpx.Response(502, text="Bad Gateway")

        assert _parse_error_response(response) == ("Bad Gateway", None, None)

    def test_empty_body(self) -> None:
        response = httpx.Response(503)

        message, _, _ = _parse_error_response(response)

        assert message == "HTTP 503 error"

    def test_non_dict_json(self) -> None:
        response = httpx.Response(400, json=["a", "b"])

        message, _, _ = _parse_error_response(response)

        assert message == "['a', 'b']"


# =============================================================================
# Helper Function Tests: _raise_for_status
# =============================================================================


class TestRaiseForStatus:
    def test_success_does_not_raise(self) -> None:
        _raise_for_status(httpx.Response(200, json={}))

    @pytest.mark.parametrize(
        "status_code, exc_type",
        [
            (422, ValidationError),
            (404, NotFoundError),
            (500, ServerError),
            (503, ServerError),
            (400, APIError),
        ],
    )
    def test_status_mapping(self, status_code, exc_type) -> None:
        response = httpx.Response(status_code, json={"detail": "boom"})

        with pytest.raises(exc_type) as exc_info:
            _raise_for_status(response)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == "boom"

    def test_response_body_is_preserved(self) -> None:
        body = {"detail": "Error", "extra": "data"}

        with pytest.raises(APIError) as exc_info:
            _raise_for_status(httpx.Response(400, json=body))

        assert exc_info.value.response_body == body


# =============================================================================
# Helper Function Tests: _calculate_backoff
# =============================================================================


class TestCalculateBackoff:
    def test_first_attempt_uses_base(self) -> None:
        assert _calculate_backoff(0) == DEFAULT_RETRY_BACKOFF_BASE

    def test_specific_values(self) -> None:
        assert [_calculate_backoff(i) for i in range(6)] == [0.5, 1.0, 2.0, 4.0, 8.0, 16.0]

    def test_capped_at_max(self) -> None:
        assert _calculate_backoff(10) == DEFAULT_RETRY_BACKOFF_MAX

    def test_custom_base(self) -> None:
        assert _calculate_backoff(2, base=1.0) == 4.0


# =============================================================================
# HTTPClient Tests
# =============================================================================


class TestHTTPClientInit:
    def test_defaults(self) -> None:
        client = HTTPClient(base_url="http://localhost:8000/")

        assert client.base_url == "http://localhost:8000"
        assert client.timeout == 30.0
        assert client.retry_enabled is False
        assert client.max_retries == 3

        client.close()

    def test_context_manager(self) -> None:
        with HTTPClient(base_url="http://localhost:8000") as client:
            assert isinstance(client, HTTPClient)


class TestHTTPClientRequests:
    def test_get_returns_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/shell/state"
            return httpx.Response(200, json={"current_directory": "/home/user"})

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            assert client.get("/shell/state") == {"current_directory": "/home/user"}

    def test_post_sends_json(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = request.content
            return httpx.Response(200, json={"results": []})

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            client.post("/shell/execute", json={"line": "pwd"})

        assert json.loads(seen["body"]) == {"line": "pwd"}

    def test_delete(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "DELETE"
            return httpx.Response(200, json={"cleared": 2})

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            assert client.delete("/shell/history") == {"cleared": 2}

    def test_none_params_are_dropped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert "path" not in request.url.params
            return httpx.Response(200, json={})

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            client.get("/filesystem/list", params={"path": None})

    def test_empty_body_returns_none(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(204))

        with HTTPClient("http://test", transport=transport) as client:
            assert client.delete("/anything") is None

    def test_error_status_raises(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(404, json={"detail": "missing"})
        )

        with HTTPClient("http://test", transport=transport) as client:
            with pytest.raises(NotFoundError):
                client.get("/filesystem/nodes", params={"path": "/x"})

    def test_connection_error_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ConnectionError) as exc_info:
                client.get("/health")

        assert exc_info.value.url == "http://test/health"
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    def test_timeout_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with HTTPClient(
            "http://test", timeout=2.0, transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(TimeoutError) as exc_info:
                client.get("/health")

        assert exc_info.value.timeout == 2.0


class TestHTTPClientRetry:
    @pytest.mark.parametrize("status_code", sorted(RETRYABLE_STATUS_CODES))
    def test_retries_then_succeeds(self, no_sleep, status_code) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) < 3:
                return httpx.Response(status_code)
            return httpx.Response(200, json={"status": "healthy"})

        with HTTPClient(
            "http://test", retry_enabled=True, transport=httpx.MockTransport(handler)
        ) as client:
            assert client.get("/health") == {"status": "healthy"}

        assert len(calls) == 3
        assert no_sleep == [0.5, 1.0]

    def test_gives_up_after_max_retries(self, no_sleep) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503, json={"detail": "busy"})

        with HTTPClient(
            "http://test",
            retry_enabled=True,
            max_retries=2,
            transport=httpx.MockTransport(handler),
        ) as client:
            with pytest.raises(ServerError):
                client.get("/health")

        assert len(calls) == 3

    def test_no_retry_when_disabled(self, no_sleep) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503)

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ServerError):
                client.get("/health")

        assert len(calls) == 1
        assert no_sleep == []

    def test_500_is_not_retried(self, no_sleep) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500)

        with HTTPClient(
            "http://test", retry_enabled=True, transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(ServerError):
                client.get("/health")

        assert len(calls) == 1

    def test_connection_error_retried(self, no_sleep) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ConnectError("refused", request=request)
            return httpx.Response(200, json={"status": "healthy"})

        with HTTPClient(
            "http://test", retry_enabled=True, transport=httpx.MockTransport(handler)
        ) as client:
            assert client.get("/health") == {"status": "healthy"}

        assert len(calls) == 2


# =============================================================================
# AsyncHTTPClient Tests
# =============================================================================


class TestAsyncHTTPClient:
    async def test_get_returns_json(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"status": "healthy"})
        )

        async with AsyncHTTPClient("http://test", transport=transport) as client:
            assert await client.get("/health") == {"status": "healthy"}

    async def test_post_and_delete(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"method": request.method})

        async with AsyncHTTPClient(
            "http://test", transport=httpx.MockTransport(handler)
        ) as client:
            assert await client.post("/shell/reset") == {"method": "POST"}
            assert await client.delete("/shell/history") == {"method": "DELETE"}

    async def test_error_status_raises(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(422, json={"detail": []})
        )

        async with AsyncHTTPClient("http://test", transport=transport) as client:
            with pytest.raises(ValidationError):
                await client.post("/shell/execute", json={})

    async def test_retries_then_succeeds(self, monkeypatch) -> None:
        delays = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr("client._http.asyncio.sleep", fake_sleep)
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(502)
            return httpx.Response(200, json={"ok": True})

        async with AsyncHTTPClient(
            "http://test", retry_enabled=True, transport=httpx.MockTransport(handler)
        ) as client:
            assert await client.get("/health") == {"ok": True}

        assert delays == [0.5]
