"""Synchronous observer registry used to report transfer events."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from hugeuploader.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class EventEmitter:
    """Register handlers per event name and invoke them in order.

    Handlers run synchronously on the emitting thread. An exception raised
    by a handler propagates to the caller of ``emit``.
    """

    def __init__(self, events: Iterable[str]) -> None:
        self._handlers: dict[str, list[Callable[..., Any]]] = {name: [] for name in events}

    def _key(self, event: str | Enum) -> str:
        name = event.value if isinstance(event, Enum) else event
        if name not in self._handlers:
            known = ", ".join(sorted(self._handlers))
            raise ValidationError(f"Unknown event '{name}' (expected one of: {known})", field="event")
        return name

    def on(self, event: str | Enum, handler: Callable[..., Any]) -> None:
        """Subscribe ``handler`` to ``event``."""
        if not callable(handler):
            raise ValidationError("handler must be callable", field="handler", value=handler)
        self._handlers[self._key(event)].append(handler)

    def off(self, event: str | Enum, handler: Callable[..., Any]) -> bool:
        """Unsubscribe ``handler``. Returns False if it was not registered."""
        handlers = self._handlers[self._key(event)]
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def listeners(self, event: str | Enum) -> list[Callable[..., Any]]:
        return list(self._handlers[self._key(event)])

    def emit(self, event: str | Enum, *args: Any) -> None:
        name = self._key(event)
        logger.debug("emit %s %s", name, args)
        for handler in list(self._handlers[name]):
            handler(*args)
