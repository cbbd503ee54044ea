from __future__ import annotations

import json
import os
from http import HTTPStatus
from typing import Any, Iterator

import pytest
from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove environment variables so settings never leak between tests.

    Yields:
        Iterator[None]: Context manager semantics for pytest.
    """
    to_clear = [k for k in os.environ.keys()]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    yield


class StubTransport(BaseAdapter):
    """requests transport that replays canned responses and records requests.

    Each queued response is a ``(status_code, body)`` pair; non-string bodies
    are JSON encoded.
    """

    def __init__(self, *responses: tuple[int, Any]) -> None:
        super().__init__()
        self._responses = list(responses)
        self.requests: list[PreparedRequest] = []
        self.send_kwargs: list[dict[str, Any]] = []

    def send(self, request: PreparedRequest, **kwargs: Any) -> Response:
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        status, body = self._responses.pop(0)
        if not isinstance(body, str):
            body = json.dumps(body)

        response = Response()
        response.status_code = status
        response.reason = HTTPStatus(status).phrase
        response.headers["Content-Type"] = "application/json"
        response._content = body.encode("utf-8")
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass


@pytest.fixture()
def stub_transport():
    """Factory fixture: ``stub_transport(*responses)`` builds a StubTransport."""
    return StubTransport


TOKEN_BODY: dict[str, Any] = {
    "access_token": "mock_access_token",
    "authentication_token": "",
    "code": "",
    "expires_in": 3600,
    "refresh_token": "mock_refresh_token",
    "scope": "",
    "state": "",
    "token_type": "",
}


@pytest.fixture()
def token_body() -> dict[str, Any]:
    """Token endpoint response body as Microsoft sends it."""
    return dict(TOKEN_BODY)
