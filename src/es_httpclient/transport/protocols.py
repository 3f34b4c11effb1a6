"""Protocols for the HTTP execution facility used by actions."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import httpx

    from es_httpclient.transport.request import HttpRequest


class HttpTransport(Protocol):
    """Execute one HTTP exchange and report its outcome through callbacks."""

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

    def close(self) -> None:
        """Release connections held by the transport."""
