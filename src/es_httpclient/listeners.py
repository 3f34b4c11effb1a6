"""Completion listeners receiving the outcome of one action."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

ResponseT = TypeVar("ResponseT")
ResponseT_contra = TypeVar("ResponseT_contra", contravariant=True)

_logger = logging.getLogger(__name__)


class ActionListener(Protocol[ResponseT_contra]):
    """Receive either a response or a failure."""

    def on_response(self, response: ResponseT_contra) -> None:
        """Handle a successful outcome."""

    def on_failure(self, exc: BaseException) -> None:
        """Handle a failed outcome."""


@dataclass(frozen=True, slots=True)
class CallbackListener(Generic[ResponseT]):
    """Listener delegating to a pair of callables."""

    response_callback: Callable[[ResponseT], None]
    failure_callback: Callable[[BaseException], None]

    def on_response(self, response: ResponseT) -> None:
        self.response_callback(response)

    def on_failure(self, exc: BaseException) -> None:
        self.failure_callback(exc)


def wrap(
    on_response: Callable[[ResponseT], None],
    on_failure: Callable[[BaseException], None],
) -> CallbackListener[ResponseT]:
    """Build a listener from a success callback and a failure callback.

    Args:
        on_response (Callable[[ResponseT], None]): Called with the response.
        on_failure (Callable[[BaseException], None]): Called with the failure.

    Returns:
        CallbackListener[ResponseT]: Listener wrapping both callables.

    """
    return CallbackListener(response_callback=on_response, failure_callback=on_failure)


class NotifyOnceListener(Generic[ResponseT]):
    """Forward only the first outcome to the wrapped listener."""

    def __init__(self, delegate: ActionListener[ResponseT]) -> None:
        self._delegate = delegate
        self._lock = threading.Lock()
        self._notified = False

    def _claim(self) -> bool:
        with self._lock:
            if self._notified:
                return False
            self._notified = True
            return True

    def on_response(self, response: ResponseT) -> None:
        if not self._claim():
            _logger.warning("Dropping a response delivered after the outcome was already notified.")
            return
        self._delegate.on_response(response)

    def on_failure(self, exc: BaseException) -> None:
        if not self._claim():
            _logger.warning("Dropping a failure delivered after the outcome was already notified: %r", exc)
            return
        self._delegate.on_failure(exc)


class PlainActionFuture(Future, Generic[ResponseT]):
    """Future completed by the action it is passed to as a listener."""

    def on_response(self, response: ResponseT) -> None:
        self.set_result(response)

    def on_failure(self, exc: BaseException) -> None:
        self.set_exception(exc)

    def action_get(self, timeout: float | None = None) -> ResponseT:
        """Wait for the outcome and return the response.

        Args:
            timeout (float | None): Seconds to wait, forever when None.

        Returns:
            ResponseT: Action response.

        Raises:
            BaseException: The failure reported by the action.

        """
        return self.result(timeout)
