"""
Failure event dispatch.

Validators hand their failure payload to a dispatch port: any callable that
takes the payload dict. Dispatcher is a plain callback registry that can be
used as that port. QtDispatcher re-emits payloads as a Qt signal so panels can
connect to validation failures the same way they connect to any other widget
signal.
"""

import itertools
import logging
import threading
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

Payload = dict[str, Any]
Listener = Callable[[Payload], None]


class Dispatcher:
    """Synchronous callback registry. Listeners run in registration order."""

    def __init__(self):
        self._listeners: dict[int, Listener] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def register(self, callback: Listener) -> int:
        """Register a listener. Returns a token for unregister()."""
        with self._lock:
            token = next(self._ids)
            self._listeners[token] = callback
        return token

    def unregister(self, token: int) -> None:
        with self._lock:
            if self._listeners.pop(token, None) is None:
                logger.warning("No listener registered for token %s", token)

    def dispatch(self, payload: Payload) -> None:
        """Call every listener with payload. Listener errors propagate."""
        with self._lock:
            listeners = list(self._listeners.values())
        logger.debug("Dispatching %s to %d listener(s)", payload.get("type"), len(listeners))
        for listener in listeners:
            listener(payload)

    def __call__(self, payload: Payload) -> None:
        self.dispatch(payload)


class QtDispatcher(QObject):
    """Dispatch port that emits the payload on validation_failed."""

    validation_failed = pyqtSignal(object)

    def __call__(self, payload: Payload) -> None:
        logger.debug("Emitting validation_failed for %s", payload.get("type"))
        self.validation_failed.emit(payload)


default_dispatcher = Dispatcher()
