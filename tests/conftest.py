from __future__ import annotations

import threading
from pathlib import Path

import httpx
import pytest

from es_httpclient import HttpClient, build_http_client

_BASE_URL = "http://cluster.test:9200"


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            p = Path(str(item.fspath)).resolve()
        except Exception:  # noqa: S112
            continue

        if p == target_dir or target_dir in p.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


class MockCluster:
    """Answer requests with canned responses and record every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], tuple[int, object]] = {}
        self._lock = threading.Lock()

    def route(self, method: str, path: str, *, status: int = 200, payload: object = None) -> None:
        """Register the answer to `method path`.

        `payload` may be a JSON value, raw `bytes`/`str`, None for an empty body,
        or an exception instance to raise instead of answering.
        """
        self._routes[(method, path)] = (status, payload)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self._routes:
            return httpx.Response(
                404,
                json={"error": {"type": "no_route", "reason": f"no route for {key}"}, "status": 404},
            )
        status, payload = self._routes[key]
        if isinstance(payload, Exception):
            raise payload
        if payload is None:
            return httpx.Response(status)
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status, content=payload)
        return httpx.Response(status, json=payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def httpx_client(self) -> httpx.Client:
        return httpx.Client(base_url=_BASE_URL, transport=httpx.MockTransport(self), trust_env=False)

    def client(self, **kwargs: object) -> HttpClient:
        return build_http_client(client=self.httpx_client(), **kwargs)


@pytest.fixture
def cluster() -> MockCluster:
    return MockCluster()
