"""Shared fixtures: an in-memory admin API standing in for the satellite."""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from satellite_admin import Admin
from satellite_admin.transport import AdminTransport

BASE_URL = "http://admin.test/api"
AUTH_TOKEN = "secret-admin-token"


class FakeAdminServer:
    """Records every request and answers with a configurable response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._respond: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(204)
        )

    def respond_with(
        self,
        status_code: int,
        json_body: Optional[Any] = None,
        **kwargs
    ) -> None:
        """Answer every following request with a fresh response."""
        if json_body is not None:
            kwargs["json"] = json_body
        self._respond = lambda request: httpx.Response(status_code, **kwargs)

    def fail_with(self, exc_type=httpx.ConnectError) -> None:
        """Simulate a network failure."""
        def fail(request):
            raise exc_type("connection refused", request=request)
        self._respond = fail

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def server():
    """Fake admin API."""
    return FakeAdminServer()


@pytest.fixture
def http_client(server):
    """httpx client routed to the fake admin API."""
    return httpx.AsyncClient(transport=httpx.MockTransport(server))


@pytest.fixture
def transport(http_client):
    return AdminTransport(BASE_URL, AUTH_TOKEN, sender=http_client)


@pytest.fixture
def admin(http_client):
    """Admin client wired to the fake admin API."""
    return Admin(BASE_URL, AUTH_TOKEN, sender=http_client)
