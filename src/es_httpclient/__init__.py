"""es-httpclient: native-client style actions over the Elasticsearch/OpenSearch REST API."""

from es_httpclient.client import HttpClient, IndicesClient, IngestClient
from es_httpclient.config import ClientSettings
from es_httpclient.errors import (
    HttpClientError,
    MissingBackendUrlError,
    RequestSerializationError,
    ResponseParseError,
    SearchEngineError,
)
from es_httpclient.factory import build_http_client, build_http_client_from_settings
from es_httpclient.listeners import ActionListener, PlainActionFuture, wrap

__all__ = [
    "ActionListener",
    "ClientSettings",
    "HttpClient",
    "HttpClientError",
    "IndicesClient",
    "IngestClient",
    "MissingBackendUrlError",
    "PlainActionFuture",
    "RequestSerializationError",
    "ResponseParseError",
    "SearchEngineError",
    "build_http_client",
    "build_http_client_from_settings",
    "wrap",
]
