"""
Publish/subscribe event dispatcher.
"""

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class EventDispatcher:
    """
    Dispatches named events to subscribed handlers.

    Handlers run synchronously in subscription order with the arguments
    passed to fire. Exceptions raised by a handler propagate to the caller.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, event: str, handler: Handler) -> None:
        """
        Subscribe a handler to an event.

        Args:
            event: The event name
            handler: Callable invoked with the fired arguments
        """
        if handler not in self._handlers[event]:
            self._handlers[event].append(handler)
            logger.debug(f"Handler subscribed to '{event}': {getattr(handler, '__name__', repr(handler))}")

    def unsubscribe(self, event: str, handler: Handler) -> None:
        if handler in self._handlers.get(event, []):
            self._handlers[event].remove(handler)

    def fire(self, event: str, *args: Any) -> int:
        """
        Fire an event.

        Args:
            event: The event name
            *args: Arguments passed to every handler

        Returns:
            The number of handlers called
        """
        handlers = list(self._handlers.get(event, []))
        logger.debug(f"Firing '{event}' to {len(handlers)} handler(s)")
        for handler in handlers:
            handler(*args)
        return len(handlers)


# Process-wide dispatcher
dispatcher = EventDispatcher()


def subscribe(event: str, handler: Handler) -> None:
    dispatcher.subscribe(event, handler)


def unsubscribe(event: str, handler: Handler) -> None:
    dispatcher.unsubscribe(event, handler)


def fire(event: str, *args: Any) -> int:
    return dispatcher.fire(event, *args)
