# app/domain/events/dispatcher.py
"""
Synchronous in-process event dispatcher.

Handlers are plain callables taking the event payload. They run in
registration order on the caller's thread; an exception raised by a handler
propagates to whoever called ``dispatch`` and later handlers do not run.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, TypeVar

logger = logging.getLogger("event_dispatcher")

E = TypeVar("E")
EventHandler = Callable[[Any], None]


class EventDispatcher:
    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, name: str, handler: EventHandler) -> None:
        self._handlers[name].append(handler)

    def unsubscribe(self, name: str, handler: EventHandler) -> None:
        """Remove ``handler`` from ``name``; unknown handlers are ignored."""
        handlers = self._handlers.get(name)
        if handlers and handler in handlers:
            handlers.remove(handler)
            if not handlers:
                del self._handlers[name]

    def handlers(self, name: str) -> list[EventHandler]:
        return list(self._handlers.get(name, ()))

    def has_handlers(self, name: str) -> bool:
        return bool(self._handlers.get(name))

    def dispatch(self, name: str, event: E) -> E:
        """Deliver ``event`` to every handler of ``name`` and return it."""
        handlers = self.handlers(name)
        logger.debug("Dispatching %s to %d handler(s)", name, len(handlers))
        for handler in handlers:
            handler(event)
        return event
