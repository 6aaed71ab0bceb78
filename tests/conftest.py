"""Shared fixtures."""

import json
from collections.abc import Callable

import httpx
import pytest

from vehicle_service.domain.repositories.preference_store import PreferenceStore, PreferenceStoreError
from vehicle_service.infrastructure.api.gateway import ApiGateway
from vehicle_service.infrastructure.storage.memory_store import InMemoryPreferenceStore

BASE_URL = "http://testserver/api"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays canned responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], httpx.Response | Callable[[httpx.Request], httpx.Response]] = {}

    def add(self, method: str, path: str, status: int = 200, json_body=None, text: str | None = None,
            headers: dict[str, str] | None = None) -> None:
        if text is not None:
            response = httpx.Response(status, text=text, headers=headers)
        elif json_body is not None:
            response = httpx.Response(status, json=json_body, headers=headers)
        else:
            response = httpx.Response(status, headers=headers)
        self.routes[(method, path)] = response

    def add_error(self, method: str, path: str, error: Exception) -> None:
        def raise_error(request: httpx.Request) -> httpx.Response:
            raise error
        self.routes[(method, path)] = raise_error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "No route"})
        if callable(route):
            return route(request)
        return route

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
async def gateway(handler):
    gw = ApiGateway(BASE_URL, timeout=5.0, transport=httpx.MockTransport(handler))
    yield gw
    await gw.close()


@pytest.fixture
def store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


class BrokenStore(PreferenceStore):
    """Store whose every operation fails."""

    async def get(self, key):
        raise PreferenceStoreError("disk on fire")

    async def set(self, key, value):
        raise PreferenceStoreError("disk on fire")

    async def remove(self, key):
        raise PreferenceStoreError("disk on fire")


@pytest.fixture
def broken_store() -> BrokenStore:
    return BrokenStore()
