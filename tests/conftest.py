"""
Shared pytest fixtures for Pivotal Tracker client tests.

Provides test configuration, an in-memory paginated Tracker collection
served through httpx.MockTransport, and a request recorder for the
single-resource endpoints.
"""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from pivotal_client.client import (
    Client,
    PAGINATION_TOTAL,
    PAGINATION_OFFSET,
    PAGINATION_LIMIT,
    PAGINATION_RETURNED,
)
from pivotal_client.config import Config, ApiConfig, AuthConfig, PaginationConfig, set_config


BASE_URL = "https://tracker.test/services/v5"


# =============================================================================
# Fake server
# =============================================================================

class FakeTracker:
    """
    Serves one paginated collection the way Tracker does: a JSON array page
    plus X-Tracker-Pagination-* headers.

    Args:
        items: Full collection in server order
        totals: Totals to report on successive calls; falls back to len(items)
        fail_on_call: 1-based call number answered with HTTP 500
        paginated: Whether to send pagination headers at all
        max_limit: Largest page the server agrees to return
    """

    def __init__(
        self,
        items: List[Dict[str, Any]],
        totals: Optional[List[int]] = None,
        fail_on_call: Optional[int] = None,
        paginated: bool = True,
        max_limit: Optional[int] = None,
    ):
        self.items = items
        self.totals = list(totals or [])
        self.fail_on_call = fail_on_call
        self.paginated = paginated
        self.max_limit = max_limit
        self.requests: List[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def limits(self) -> List[int]:
        return [int(r.url.params["limit"]) for r in self.requests]

    def offsets(self) -> List[int]:
        return [int(r.url.params["offset"]) for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_on_call == self.calls:
            return httpx.Response(
                500,
                json={"code": "internal_server_error", "kind": "error", "error": "boom"},
            )

        offset = int(request.url.params.get("offset", 0))
        limit = int(request.url.params.get("limit", len(self.items)))
        if self.max_limit is not None:
            limit = min(limit, self.max_limit)
        page = self.items[offset:offset + limit]
        total = self.totals.pop(0) if self.totals else len(self.items)

        headers = {}
        if self.paginated:
            headers = {
                PAGINATION_TOTAL: str(total),
                PAGINATION_OFFSET: str(offset),
                PAGINATION_LIMIT: str(limit),
                PAGINATION_RETURNED: str(len(page)),
            }
        return httpx.Response(200, json=page, headers=headers)


class Recorder:
    """Answers every request with a fixed response and keeps the requests."""

    def __init__(self, status_code: int = 200, body: Any = None, headers: Optional[Dict[str, str]] = None):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.requests: List[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is None:
            return httpx.Response(self.status_code, headers=self.headers)
        return httpx.Response(self.status_code, json=self.body, headers=self.headers)


def story_items(count: int) -> List[Dict[str, Any]]:
    return [
        {"kind": "story", "id": i, "project_id": 99, "name": f"Story {i}", "story_type": "feature"}
        for i in range(count)
    ]


def epic_items(count: int) -> List[Dict[str, Any]]:
    return [{"kind": "epic", "id": i, "project_id": 99, "name": f"Epic {i}"} for i in range(count)]


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def test_config() -> Config:
    """Create a test configuration pointing at the fake host."""
    return Config(
        api=ApiConfig(base_url=BASE_URL, timeout=5.0, connect_timeout=2.0),
        auth=AuthConfig(token="config-token"),
        pagination=PaginationConfig(page_limit=10),
    )


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture
def make_client(test_config) -> Callable[[Callable[[httpx.Request], httpx.Response]], Client]:
    """Build a Client whose requests go to the given handler."""
    clients = []

    def _make(handler, token: Optional[str] = "test-token", config: Optional[Config] = None) -> Client:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        client = Client(token=token, config=config or test_config, http_client=http)
        clients.append(http)
        return client

    yield _make

    for http in clients:
        http.close()


@pytest.fixture
def serve(make_client):
    """Serve a collection from a FakeTracker; returns (tracker, client)."""

    def _serve(items: List[Dict[str, Any]], **kwargs):
        tracker = FakeTracker(items, **kwargs)
        return tracker, make_client(tracker.handler)

    return _serve


@pytest.fixture
def stories() -> Callable[[int], List[Dict[str, Any]]]:
    return story_items


@pytest.fixture
def epics() -> Callable[[int], List[Dict[str, Any]]]:
    return epic_items


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(make_client, recorder) -> Client:
    """Client wired to the recorder."""
    return make_client(recorder.handler)


# =============================================================================
# Cleanup Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def cleanup_global_state():
    """Clean up global state after each test."""
    yield
    set_config(None)
