"""
core/events.py — Event subscription registry for FarmerHarvest.

main.py drains pygame's event queue once per frame and hands every event
to EventBus.dispatch(). Game and InputState subscribe handlers for the
event types they care about and unsubscribe them in dispose().

Handlers are matched by identity on unsubscribe, so callers must keep
the exact callable they subscribed. For bound methods that means storing
the bound method once, e.g. ``self._on_key = self.on_key``, because every
attribute access creates a new bound-method object.

Usage:
    bus = EventBus()
    handler = bus.subscribe(pygame.KEYDOWN, on_key)
    ...
    for event in pygame.event.get():
        bus.dispatch(event)
    ...
    bus.unsubscribe(pygame.KEYDOWN, handler)
"""

from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable

import pygame

logger = logging.getLogger(__name__)

Handler = Callable[[pygame.event.Event], None]


class EventBus:
    """Routes pygame events to subscribed handlers by event type.

    Attributes:
        _handlers: Mapping of pygame event type → handlers in subscription order.
    """

    def __init__(self) -> None:
        self._handlers: dict[int, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: int, handler: Handler) -> Handler:
        """Register a handler for one event type.

        Args:
            event_type: A pygame event type constant, e.g. pygame.KEYDOWN.
            handler:    Callable taking the event.

        Returns:
            The handler itself, to keep for unsubscribe().
        """
        self._handlers[event_type].append(handler)
        return handler

    def unsubscribe(self, event_type: int, handler: Handler) -> bool:
        """Remove a previously subscribed handler.

        Args:
            event_type: The event type the handler was subscribed to.
            handler:    The exact callable passed to subscribe().

        Returns:
            True if the handler was found and removed, False otherwise.
        """
        handlers = self._handlers.get(event_type, [])
        for i, registered in enumerate(handlers):
            if registered is handler:
                del handlers[i]
                return True
        logger.debug("unsubscribe: handler %r not registered for %s",
                     handler, pygame.event.event_name(event_type))
        return False

    def dispatch(self, event: pygame.event.Event) -> None:
        """Call every handler subscribed to the event's type, in order."""
        # copy so handlers may unsubscribe themselves mid-dispatch
        for handler in list(self._handlers.get(event.type, ())):
            handler(event)

    def subscriber_count(self, event_type: int | None = None) -> int:
        """Return the number of live subscriptions, optionally for one type."""
        if event_type is not None:
            return len(self._handlers.get(event_type, ()))
        return sum(len(h) for h in self._handlers.values())
