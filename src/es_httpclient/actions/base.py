"""Shared request/response plumbing of the REST action adapters."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from es_httpclient.domain import ActionRequest, ActionResponse
from es_httpclient.errors import RequestSerializationError, ResponseParseError, SearchEngineError, unwrap_failure
from es_httpclient.listeners import NotifyOnceListener
from es_httpclient.transport import NDJSON_CONTENT_TYPE, HttpRequest

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx

    from es_httpclient.domain.requests import MasterNodeRequest
    from es_httpclient.listeners import ActionListener
    from es_httpclient.transport import HttpTransport

RequestT = TypeVar("RequestT", bound=ActionRequest)
ResponseT = TypeVar("ResponseT", bound=ActionResponse)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpAction(Generic[RequestT, ResponseT]):
    """Translate one transport action into one HTTP exchange and back.

    Subclasses describe the exchange in `build_request` and, when the reply is
    not a plain JSON object matching `response_model`, override `parse_response`.
    Every call delivers exactly one outcome to the listener:

    - a non-2xx status becomes a `SearchEngineError`;
    - an unparseable body becomes a `ResponseParseError` chained to its cause;
    - transport failures are passed through unchanged, including errors raised
      while sending (closed client, executor shut down).
    """

    transport: HttpTransport

    name: ClassVar[str]
    response_model: ClassVar[type[ActionResponse]]

    def execute(self, request: RequestT, listener: ActionListener[ResponseT]) -> None:
        """Send `request` and report the parsed response to `listener`.

        Args:
            request (RequestT): Action request.
            listener (ActionListener[ResponseT]): Receives the outcome.

        """
        once: NotifyOnceListener[ResponseT] = NotifyOnceListener(listener)
        try:
            http_request = self.build_request(request)
        except RequestSerializationError as exc:
            once.on_failure(exc)
            return

        try:
            self.transport.send(
                http_request,
                on_response=lambda response: self._handle_response(response, once),
                on_failure=lambda exc: once.on_failure(unwrap_failure(exc)),
            )
        except Exception as exc:  # noqa: BLE001
            _logger.debug("%s could not be sent: %r", self.name, exc)
            once.on_failure(unwrap_failure(exc))

    def build_request(self, request: RequestT) -> HttpRequest:
        """Describe the HTTP exchange for `request`.

        Every concrete action overrides this; the base class has no endpoint.

        Raises:
            RequestSerializationError: If the request body cannot be encoded.

        """
        raise NotImplementedError

    def accepts(self, response: httpx.Response) -> bool:
        """Return whether `response` carries a result rather than an error."""
        return response.is_success

    def parse_response(self, response: httpx.Response) -> ResponseT:
        """Parse the reply body into the endpoint response model."""
        return self.response_model.model_validate(response.json())  # type: ignore[return-value]

    def _handle_response(self, response: httpx.Response, listener: ActionListener[ResponseT]) -> None:
        if not self.accepts(response):
            _logger.debug("%s answered with status %d.", self.name, response.status_code)
            listener.on_failure(SearchEngineError.from_response(response))
            return

        try:
            parsed = self._parse(response)
        except ResponseParseError as exc:
            listener.on_failure(exc)
            return
        listener.on_response(parsed)

    def _parse(self, response: httpx.Response) -> ResponseT:
        try:
            return self.parse_response(response)
        except (ValueError, TypeError, KeyError) as exc:
            _logger.debug("Failed to parse the response of %s: %s", self.name, exc)
            raise ResponseParseError(self.name, response.status_code) from exc

    def json_body(self, payload: Any) -> bytes:
        """Serialize `payload` as a JSON request body.

        Raises:
            RequestSerializationError: If `payload` is not JSON serializable.

        """
        try:
            return json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestSerializationError(self.name) from exc

    def ndjson_body(self, lines: Iterable[Any]) -> bytes:
        """Serialize `lines` as a newline-delimited JSON request body.

        Raises:
            RequestSerializationError: If a line is not JSON serializable.

        """
        try:
            payload = "\n".join(json.dumps(line, ensure_ascii=False) for line in lines) + "\n"
        except (TypeError, ValueError) as exc:
            raise RequestSerializationError(self.name) from exc
        return payload.encode("utf-8")

    def with_json(self, http_request: HttpRequest, payload: Any) -> HttpRequest:
        """Return `http_request` carrying `payload` as its JSON body."""
        return http_request.with_body(self.json_body(payload))

    def with_ndjson(self, http_request: HttpRequest, lines: Iterable[Any]) -> HttpRequest:
        """Return `http_request` carrying `lines` as its NDJSON body."""
        return http_request.with_body(self.ndjson_body(lines), NDJSON_CONTENT_TYPE)


def with_master_timeouts(http_request: HttpRequest, request: MasterNodeRequest) -> HttpRequest:
    """Add the `timeout` and `master_timeout` parameters when they are set."""
    return http_request.with_param("timeout", request.timeout).with_param("master_timeout", request.master_timeout)


def present_fields(**fields: Any) -> dict[str, Any]:
    """Return the keyword arguments whose value is not None."""
    return {key: value for key, value in fields.items() if value is not None}
