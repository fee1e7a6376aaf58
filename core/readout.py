"""
core/readout.py — Optional text readouts pushed by the game.

The game reports its score, remaining time, goal, status and active
power-ups as plain strings. A Readout is a bag of named text fields that
receives them; main.py draws it in the HUD strip under the playfield.

A readout may expose only some fields. Game logs the missing ones once at
construction, and set() on an absent field does nothing, so a partial
HUD (or none at all) never stops the game.
"""

from __future__ import annotations
from typing import Iterable, Iterator

# Every field Game knows how to fill, in HUD display order
READOUT_FIELDS = ("score", "time", "goal", "status", "power_ups")


class Readout:
    """Named text fields for HUD display.

    Attributes:
        _values: Field name → current text, in display order.
    """

    def __init__(self, fields: Iterable[str] = READOUT_FIELDS) -> None:
        self._values: dict[str, str] = {name: "" for name in fields}

    def has(self, name: str) -> bool:
        return name in self._values

    def set(self, name: str, text: str) -> None:
        """Replace a field's text. No-op if the field does not exist."""
        if name in self._values:
            self._values[name] = text

    def get(self, name: str) -> str | None:
        """Return a field's text, or None if the field does not exist."""
        return self._values.get(name)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._values.items())
