"""Project-specific exceptions for es-httpclient."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

_UNKNOWN_ERROR_TYPE = "unknown"


class HttpClientError(Exception):
    """Base exception for the project."""


class SearchEngineError(HttpClientError):
    """Raised when the cluster answers with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        *,
        error_type: str = _UNKNOWN_ERROR_TYPE,
        reason: str | None = None,
        body: Any = None,
    ) -> None:
        """Build exception payload from an engine error response."""
        message = f"[{status_code}] {error_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.reason = reason
        self.body = body

    @classmethod
    def from_response(cls, response: httpx.Response) -> SearchEngineError:
        """Build an error from an HTTP response carrying the engine error schema.

        The engine answers either ``{"error": {"type": ..., "reason": ...}, "status": ...}``
        or, for some endpoints, ``{"error": "message", "status": ...}``. Bodies that are
        not JSON at all (e.g. proxies, HEAD requests) are kept as raw text.

        Args:
            response (httpx.Response): Failed HTTP response.

        Returns:
            SearchEngineError: Error carrying status code and engine detail.

        """
        raw = response.text
        try:
            body: Any = json.loads(raw) if raw else None
        except ValueError:
            return cls(response.status_code, reason=raw or None, body=raw)

        if not isinstance(body, dict):
            return cls(response.status_code, body=body)

        error = body.get("error")
        if isinstance(error, dict):
            return cls(
                response.status_code,
                error_type=str(error.get("type", _UNKNOWN_ERROR_TYPE)),
                reason=error.get("reason"),
                body=body,
            )
        if isinstance(error, str):
            return cls(response.status_code, reason=error, body=body)
        return cls(response.status_code, body=body)

    @property
    def root_causes(self) -> list[dict[str, Any]]:
        """Return the engine-reported root causes, if any."""
        if not isinstance(self.body, dict):
            return []
        error = self.body.get("error")
        if not isinstance(error, dict):
            return []
        return list(error.get("root_cause") or [])


class ResponseParseError(HttpClientError, ValueError):
    """Raised when a response body does not match the endpoint schema."""

    def __init__(self, action: str, status_code: int) -> None:
        """Build exception payload for unparseable response bodies."""
        super().__init__(f"Failed to parse the response of '{action}' (status {status_code}).")
        self.action = action
        self.status_code = status_code


class RequestSerializationError(HttpClientError, ValueError):
    """Raised when a request cannot be serialized into an HTTP body."""

    def __init__(self, action: str) -> None:
        """Build exception payload for unserializable requests."""
        super().__init__(f"Failed to serialize the request of '{action}'.")
        self.action = action


class MissingBackendUrlError(ValueError, HttpClientError):
    """Raised when no backend URL is supplied and no client is injected."""

    def __init__(self) -> None:
        """Build exception payload for missing backend URLs."""
        super().__init__("Backend URL is required when no client instance is provided.")


def unwrap_failure(exc: BaseException) -> BaseException:
    """Return the project error hidden behind a wrapping exception, if any.

    Args:
        exc (BaseException): Failure reported by the transport.

    Returns:
        BaseException: The wrapped `HttpClientError` cause, or `exc` unchanged.

    """
    if isinstance(exc, HttpClientError):
        return exc
    cause = exc.__cause__
    if isinstance(cause, HttpClientError):
        return cause
    return exc
