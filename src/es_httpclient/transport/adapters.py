"""Transport implementation backed by an httpx client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from concurrent.futures import Executor

    from es_httpclient.transport.request import HttpRequest

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HttpxTransport:
    """Thin adapter executing `HttpRequest` values with `httpx.Client`.

    Without an executor the exchange completes on the calling thread, before
    `send` returns. With one, the exchange and its callbacks run on the executor.
    """

    client: httpx.Client
    executor: Executor | None = None

    @classmethod
    def from_connection(
        cls,
        *,
        url: str,
        timeout_s: float,
        verify_certs: bool,
        headers: Mapping[str, str] | None = None,
        executor: Executor | None = None,
    ) -> HttpxTransport:
        """Build a transport from connection settings.

        Args:
            url (str): Backend URL.
            timeout_s (float): Request timeout in seconds.
            verify_certs (bool): Whether TLS certificates are verified.
            headers (Mapping[str, str] | None): Extra headers sent with every request.
            executor (Executor | None): Optional executor for asynchronous completion.

        Returns:
            HttpxTransport: Configured transport.

        """
        client = httpx.Client(
            base_url=url.rstrip("/"),
            timeout=timeout_s,
            verify=verify_certs,
            headers=dict(headers or {}),
        )
        return cls(client=client, executor=executor)

    def send(
        self,
        request: HttpRequest,
        *,
        on_response: Callable[[httpx.Response], None],
        on_failure: Callable[[BaseException], None],
    ) -> None:
        """Send `request` and invoke exactly one of the callbacks.

        Args:
            request (HttpRequest): Exchange description.
            on_response (Callable[[httpx.Response], None]): Called with any HTTP response.
            on_failure (Callable[[BaseException], None]): Called when no response could be obtained.

        """
        if self.executor is None:
            self._exchange(request, on_response, on_failure)
            return
        self.executor.submit(self._exchange, request, on_response, on_failure)

    def _exchange(
        self,
        request: HttpRequest,
        on_response: Callable[[httpx.Response], None],
        on_failure: Callable[[BaseException], None],
    ) -> None:
        headers = {"Content-Type": request.content_type} if request.content_type else None
        try:
            response = self.client.request(
                request.method.value,
                request.path,
                params=list(request.params),
                content=request.body,
                headers=headers,
            )
        except Exception as exc:  # noqa: BLE001
            _logger.debug("%s %s failed: %s", request.method, request.path, exc)
            on_failure(exc)
            return

        _logger.debug("%s %s -> %d", request.method, request.path, response.status_code)
        try:
            on_response(response)
        except Exception as exc:  # noqa: BLE001
            on_failure(exc)

    def close(self) -> None:
        """Close the underlying httpx client."""
        self.client.close()
