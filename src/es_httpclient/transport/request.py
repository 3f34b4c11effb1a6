"""Description of one HTTP exchange, built by actions and executed by a transport."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from collections.abc import Sequence

    from es_httpclient.domain import HttpMethod

JSON_CONTENT_TYPE = "application/json"
NDJSON_CONTENT_TYPE = "application/x-ndjson"
# Index lists and wildcard patterns are part of the REST path syntax.
_PATH_SAFE_CHARS = ",*"
# URL normalization drops bare dot segments, which would retarget the call.
_DOT_SEGMENTS = {".": "%2E", "..": "%2E%2E"}


def _quote_segment(part: str) -> str:
    return _DOT_SEGMENTS.get(part) or quote(part, safe=_PATH_SAFE_CHARS)


def build_path(*segments: str, indices: Sequence[str] = ()) -> str:
    """Build a REST path from an optional index list and path segments.

    Args:
        *segments (str): Endpoint segments and identifiers, in order.
        indices (Sequence[str]): Optional index names, joined as the first segment.

    Returns:
        str: Percent-encoded path starting with `/`. Segments that are exactly
            `.` or `..` are encoded so they are never resolved away.

    """
    parts: list[str] = []
    if indices:
        parts.append(",".join(indices))
    parts.extend(segments)
    return "/" + "/".join(_quote_segment(part) for part in parts)


def format_param(value: object) -> str:
    """Render one query parameter value the way the REST layer expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """Method, path, query parameters and body of one REST call."""

    method: HttpMethod
    path: str
    params: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None
    content_type: str | None = None

    @classmethod
    def build(cls, method: HttpMethod, *segments: str, indices: Sequence[str] = ()) -> HttpRequest:
        """Build a request without parameters or body.

        Args:
            method (HttpMethod): HTTP method.
            *segments (str): Endpoint segments and identifiers.
            indices (Sequence[str]): Optional index names.

        Returns:
            HttpRequest: Request description.

        """
        return cls(method=method, path=build_path(*segments, indices=indices))

    def with_param(self, name: str, value: object) -> HttpRequest:
        """Return a copy carrying one more query parameter, unless `value` is None."""
        if value is None:
            return self
        return replace(self, params=(*self.params, (name, format_param(value))))

    def with_body(self, body: bytes, content_type: str = JSON_CONTENT_TYPE) -> HttpRequest:
        """Return a copy carrying `body`."""
        return replace(self, body=body, content_type=content_type)

    @property
    def query(self) -> dict[str, str]:
        """Return query parameters as a mapping."""
        return dict(self.params)
