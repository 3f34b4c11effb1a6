"""Factory helpers to instantiate a configured HTTP client."""

from __future__ import annotations

from typing import TYPE_CHECKING

from es_httpclient.client import HttpClient
from es_httpclient.config import DEFAULT_TIMEOUT_S
from es_httpclient.errors import MissingBackendUrlError
from es_httpclient.transport import HttpxTransport

if TYPE_CHECKING:
    from concurrent.futures import Executor

    import httpx

    from es_httpclient.config import ClientSettings


def build_http_client(
    *,
    client: httpx.Client | None = None,
    url: str | None = None,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    verify_certs: bool = True,
    executor: Executor | None = None,
) -> HttpClient:
    """Build a client from user options.

    Args:
        client (httpx.Client | None): Optional pre-configured httpx client, with its base URL set.
        url (str | None): Backend URL when no client is injected.
        timeout_s (float): Request timeout in seconds.
        verify_certs (bool): Whether TLS certificates are verified.
        executor (Executor | None): Optional executor for asynchronous completion.

    Raises:
        MissingBackendUrlError: If `url` is missing when `client` is absent.

    Returns:
        HttpClient: Client facade.

    """
    if client is not None:
        return HttpClient(HttpxTransport(client=client, executor=executor))
    if not url:
        raise MissingBackendUrlError
    return HttpClient(
        HttpxTransport.from_connection(
            url=url,
            timeout_s=timeout_s,
            verify_certs=verify_certs,
            executor=executor,
        ),
    )


def build_http_client_from_settings(settings: ClientSettings, *, executor: Executor | None = None) -> HttpClient:
    """Build a client from connection settings.

    Args:
        settings (ClientSettings): Connection settings.
        executor (Executor | None): Optional executor for asynchronous completion.

    Returns:
        HttpClient: Client facade.

    """
    return HttpClient(
        HttpxTransport.from_connection(
            url=settings.url,
            timeout_s=settings.timeout_s,
            verify_certs=settings.verify_certs,
            headers=settings.headers,
            executor=executor,
        ),
    )
