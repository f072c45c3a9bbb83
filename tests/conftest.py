"""
Shared pytest fixtures and configuration for all tests.
"""

import json
import logging
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from lodging_gateway.api.app import create_app
from lodging_gateway.config import Settings
from lodging_gateway.logging import configure_logging

SERVICE_URLS = {
    "users": "http://accounts.test:3000/api/v1/users",
    "roles": "http://accounts.test:3000/api/v1/role",
    "locations": "http://listings.test:3030/api/v1/location",
    "lodging_images": "http://listings.test:3030/api/v1/lodging_image",
    "lodgings": "http://listings.test:3030/api/v1/lodging",
    "reservations": "http://accounts.test:3000/api/v1/reservation",
}


class StubUpstream:
    """In-memory stand-in for the upstream REST services.

    Replies are registered per (method, host, path); every request that
    reaches the transport is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.unreachable_hosts: set[str] = set()

    def reply(
        self,
        method: str,
        url: str,
        json_body: Any = None,
        status_code: int = 200,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=json_body)

        self.route(method, url, respond)

    def route(
        self, method: str, url: str, handler: Callable[[httpx.Request], httpx.Response]
    ) -> None:
        parsed = httpx.URL(url)
        self._routes[(method, parsed.host, parsed.path)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host in self.unreachable_hosts:
            raise httpx.ConnectError("Connection refused", request=request)
        route = self._routes.get((request.method, request.url.host, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "no stub for this route"})
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def body_of(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def service_urls() -> dict[str, str]:
    return dict(SERVICE_URLS)


@pytest.fixture
def settings(service_urls: dict[str, str]) -> Settings:
    return Settings(
        _env_file=None,
        users_url=service_urls["users"],
        roles_url=service_urls["roles"],
        locations_url=service_urls["locations"],
        lodging_images_url=service_urls["lodging_images"],
        lodgings_url=service_urls["lodgings"],
        reservations_url=service_urls["reservations"],
    )


@pytest.fixture
def upstream() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def client(settings: Settings, upstream: StubUpstream) -> Generator[TestClient, None, None]:
    app = create_app(settings, transport=upstream.transport)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def graphql(client: TestClient) -> Callable[..., dict[str, Any]]:
    """POST a GraphQL document and return the decoded response body."""

    def execute(
        query: str,
        variables: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        response = client.post("/graphql", json=payload, headers=headers)
        assert response.status_code == 200, response.text
        return response.json()

    return execute


@pytest.fixture
def log_events(caplog: pytest.LogCaptureFixture) -> Callable[[str], list[dict[str, Any]]]:
    """Structlog events captured during the test, decoded and filtered by name.

    Logging is configured here, during setup, so the capture handler pytest
    installs for the test body is not replaced.
    """
    configure_logging()
    caplog.set_level(logging.INFO)

    def events(name: str) -> list[dict[str, Any]]:
        found = []
        for record in caplog.records:
            try:
                event = json.loads(record.getMessage())
            except ValueError:
                continue
            if isinstance(event, dict) and event.get("event") == name:
                found.append(event)
        return found

    return events
