"""
core/session.py — Per-round score state for FarmerHarvest.

Session tracks all mutable data that describes the player's progress in
the current round:
    - Score and the win goal
    - Floating "+points" texts spawned by harvests

Session does NOT own the timer, entities, or any rendering. It is a pure
data container with methods for state transitions. game.py is the sole
caller.

Usage:
    session = Session(goal=15)
    session.reset()

    # on harvest:
    session.register_harvest(crops)

    # each PLAYING frame:
    session.update_floaters(dt)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from entities.crop import Crop
from settings import GOAL, FLOATER_FADE_PER_S, FLOATER_RISE_PER_S
from utils.color import RGBColor


@dataclass
class FloatingText:
    """A rising, fading "+points" label.

    Attributes:
        x:      Horizontal center in field units.
        y:      Baseline in field units; decreases as the text rises.
        points: Value shown as "+points".
        color:  RGB text color, taken from the crop's head color.
        life:   1.0 when spawned, removed at 0. Doubles as opacity.
    """
    x:      float
    y:      float
    points: int
    color:  RGBColor
    life:   float = 1.0

    @property
    def label(self) -> str:
        return f"+{self.points}"


class Session:
    """Mutable score state for one round.

    Attributes:
        score:     Points harvested this round. Never decreases mid-round.
        goal:      Points needed to win.
        floaters:  Live FloatingText effects.
    """

    def __init__(self, goal: int = GOAL) -> None:
        self.score:    int                = 0
        self.goal:     int                = goal
        self.floaters: list[FloatingText] = []

    def reset(self) -> None:
        """Zero the score and clear effects for a fresh round."""
        self.score = 0
        self.floaters.clear()

    def register_harvest(self, crops: Sequence[Crop]) -> int:
        """Score a batch of crops harvested on the same frame.

        Spawns one floating text per crop and adds the summed value to the
        score in a single step. The score is not capped at the goal.

        Args:
            crops: Crops harvested this frame. May be empty.

        Returns:
            Points added.
        """
        for crop in crops:
            self.floaters.append(FloatingText(
                x=crop.x + crop.w / 2,
                y=crop.y,
                points=crop.value,
                color=crop.spec.head_color,
            ))
        points = sum(crop.value for crop in crops)
        self.score += points
        return points

    def reached_goal(self) -> bool:
        return self.score >= self.goal

    def update_floaters(self, dt: float) -> None:
        """Fade and lift every floating text; drop the expired ones.

        Args:
            dt: Delta time in seconds.
        """
        for floater in self.floaters:
            floater.life -= dt * FLOATER_FADE_PER_S
            floater.y -= dt * FLOATER_RISE_PER_S
        self.floaters = [f for f in self.floaters if f.life > 0]
