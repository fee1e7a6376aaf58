"""
core/input.py — Held-key tracking for FarmerHarvest.

InputState keeps the set of keys currently held down. It is updated by
KEYDOWN / KEYUP events between frames, and read once per frame by
Farmer.handle_input() through axis().

The pause key is special: pressing it toggles pause immediately, inside
the KEYDOWN handler, rather than waiting for the next update().

Usage:
    input_state = InputState(bus, on_pause=game.toggle_pause)
    ...
    farmer.handle_input(input_state)
    ...
    input_state.dispose()
"""

from __future__ import annotations
from typing import Callable, Iterable

import pygame

from core.events import EventBus
from settings import KEY_PAUSE


class InputState:
    """Set of held keys plus an immediate pause toggle.

    Attributes:
        keys:      pygame key codes currently held down.
        _bus:      EventBus the handlers are subscribed to.
        _on_pause: Callback fired on every pause key press.
        _on_key_down / _on_key_up: The exact bound methods subscribed,
                   kept so dispose() can remove those same objects.
    """

    def __init__(self, bus: EventBus, on_pause: Callable[[], None] | None = None) -> None:
        self.keys: set[int] = set()
        self._bus      = bus
        self._on_pause = on_pause
        self._subscribed = True

        self._on_key_down = bus.subscribe(pygame.KEYDOWN, self.on_key_down)
        self._on_key_up   = bus.subscribe(pygame.KEYUP, self.on_key_up)

    def on_key_down(self, event: pygame.event.Event) -> None:
        if event.key == KEY_PAUSE and self._on_pause:
            self._on_pause()
        self.keys.add(event.key)

    def on_key_up(self, event: pygame.event.Event) -> None:
        self.keys.discard(event.key)

    def is_held(self, keys: Iterable[int]) -> bool:
        """Return True if any of the given keys is held."""
        return any(k in self.keys for k in keys)

    def axis(self, negative: Iterable[int], positive: Iterable[int]) -> int:
        """Resolve one movement axis to -1, 0 or 1.

        Args:
            negative: Keys that push toward -1 (left / up).
            positive: Keys that push toward +1 (right / down).

        Returns:
            int(positive held) - int(negative held).
        """
        return int(self.is_held(positive)) - int(self.is_held(negative))

    def clear(self) -> None:
        """Forget all held keys, e.g. when the window loses focus."""
        self.keys.clear()

    def dispose(self) -> None:
        """Unsubscribe both key handlers. Safe to call more than once."""
        if not self._subscribed:
            return
        self._bus.unsubscribe(pygame.KEYDOWN, self._on_key_down)
        self._bus.unsubscribe(pygame.KEYUP, self._on_key_up)
        self._subscribed = False
