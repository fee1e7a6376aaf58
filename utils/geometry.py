"""
utils/geometry.py — Collision and bounds helpers for FarmerHarvest.

Everything in the world is an axis-aligned box with x, y, w, h attributes.
These helpers accept any object shaped like that (entities, plain
namespaces in tests) so they stay free of pygame.Rect's integer rounding.
"""

import math
from typing import Protocol


class Box(Protocol):
    """Anything with a top-left corner and a size."""

    x: float
    y: float
    w: float
    h: float


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a value to [lo, hi].

    Args:
        value: The number to clamp.
        lo:    Lower bound (inclusive).
        hi:    Upper bound (inclusive).

    Returns:
        The clamped number.
    """
    return min(hi, max(lo, value))


def aabb(a: Box, b: Box) -> bool:
    """Return True if two boxes overlap.

    Boxes that only share an edge do not overlap.
    """
    return (
        a.x < b.x + b.w and
        a.x + a.w > b.x and
        a.y < b.y + b.h and
        a.y + a.h > b.y
    )


def center(box: Box) -> tuple[float, float]:
    """Return the (x, y) center point of a box."""
    return box.x + box.w / 2, box.y + box.h / 2


def within_radius(a: Box, b: Box, radius: float) -> bool:
    """Return True if the centers of two boxes are at most radius apart.

    Used by area harvesting, which ignores box overlap entirely.

    Args:
        a:      First box, usually the farmer.
        b:      Second box, usually a crop.
        radius: Maximum center-to-center distance (inclusive).

    Returns:
        True if the distance between centers is <= radius.
    """
    ax, ay = center(a)
    bx, by = center(b)
    return math.hypot(ax - bx, ay - by) <= radius
