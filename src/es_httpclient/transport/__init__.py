"""HTTP exchange descriptions and the transports executing them."""

from es_httpclient.transport.adapters import HttpxTransport
from es_httpclient.transport.protocols import HttpTransport
from es_httpclient.transport.request import (
    JSON_CONTENT_TYPE,
    NDJSON_CONTENT_TYPE,
    HttpRequest,
    build_path,
    format_param,
)

__all__ = [
    "JSON_CONTENT_TYPE",
    "NDJSON_CONTENT_TYPE",
    "HttpRequest",
    "HttpTransport",
    "HttpxTransport",
    "build_path",
    "format_param",
]
