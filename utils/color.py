"""
utils/color.py — Color manipulation helpers for FarmerHarvest.

Renderers derive shading (pumpkin ridges, glow auras, fading score text)
from the base colors in settings.py instead of hardcoding every variant.
"""

from typing import Tuple

from utils.geometry import clamp

RGBColor  = Tuple[int, int, int]
RGBAColor = Tuple[int, int, int, int]


def _channel(value: float) -> int:
    return int(clamp(value, 0, 255))


def darker(color: RGBColor, amount: int = 40) -> RGBColor:
    """Return a darkened version of an RGB color.

    Args:
        color:  Base RGB tuple, e.g. (255, 111, 0).
        amount: How much to subtract from each channel. Defaults to 40.

    Returns:
        A new RGB tuple, each channel clamped at 0.
    """
    r, g, b = color
    return (_channel(r - amount), _channel(g - amount), _channel(b - amount))


def with_alpha(color: RGBColor, opacity: float) -> RGBAColor:
    """Append an alpha channel to an RGB tuple.

    Args:
        color:   Base RGB tuple.
        opacity: Opacity in [0.0, 1.0]. Values outside are clamped.

    Returns:
        An RGBA tuple suitable for drawing on an SRCALPHA surface.
    """
    return (color[0], color[1], color[2], _channel(opacity * 255))
