"""
core/timer.py — Round countdown for FarmerHarvest.

RoundTimer owns only its own state — it does not touch score or game
state. game.py ticks it while PLAYING and polls is_expired().

Usage:
    timer = RoundTimer(60.0)

    # each PLAYING frame:
    timer.update(dt)
    if timer.is_expired():
        # resolve WIN / GAME_OVER in game.py
"""

import math

from settings import ROUND_LENGTH_S
from utils.geometry import clamp


class RoundTimer:
    """Countdown clamped to [0, limit].

    Attributes:
        _limit:     Total seconds in a round.
        _remaining: Seconds left in the current round.
    """

    def __init__(self, limit: float = ROUND_LENGTH_S) -> None:
        self._limit:     float = limit
        self._remaining: float = limit

    def reset(self) -> None:
        """Refill the timer to the full round length."""
        self._remaining = self._limit

    def update(self, dt: float) -> None:
        """Count down by dt seconds, never below zero.

        Args:
            dt: Delta time in seconds since the last frame.
        """
        self._remaining = clamp(self._remaining - dt, 0, self._limit)

    def remaining(self) -> float:
        """Return remaining seconds as a float."""
        return self._remaining

    def display_seconds(self) -> int:
        """Return remaining whole seconds, rounded up, for the HUD.

        Returns:
            ceil(remaining). 60 at the start of a round, 0 only once expired.
        """
        return math.ceil(self._remaining)

    def is_expired(self) -> bool:
        return self._remaining <= 0

    def limit(self) -> float:
        return self._limit
