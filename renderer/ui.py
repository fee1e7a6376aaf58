"""
renderer/ui.py — Text overlays for FarmerHarvest.

Draws all non-entity interface elements:
    - Floating "+points" texts over harvested crops
    - State banner (menu / paused / game over / win prompt)
    - HUD strip with the readout fields (drawn by main.py, below the field)

All functions are stateless — they take explicit data arguments and draw
to the provided surface. No global state is read except constants from
settings.py and the font cache.
"""

from __future__ import annotations
from typing import Iterable

import pygame
from settings import (
    SCREEN_W, HUD_H,
    COLOR,
    FONT_FAMILY, FONT_SIZE_LG, FONT_SIZE_MD,
)
from core.readout import Readout
from core.session import FloatingText


# ── Font cache ────────────────────────────────────────────────────────────────
# Fonts are loaded once and reused. SysFont falls back to pygame's bundled
# default font when none of FONT_FAMILY is installed (e.g. in the browser).
_fonts: dict[tuple[int, bool], pygame.font.Font] = {}


def _font(size: int, bold: bool = False) -> pygame.font.Font:
    """Return a cached font at the given size.

    Args:
        size: Point size.
        bold: True for the bold face.

    Returns:
        A pygame.font.Font instance.
    """
    key = (size, bold)
    if key not in _fonts:
        _fonts[key] = pygame.font.SysFont(FONT_FAMILY, size, bold=bold)
    return _fonts[key]


# ── Floating texts ────────────────────────────────────────────────────────────

def draw_floaters(surface: pygame.Surface, floaters: Iterable[FloatingText]) -> None:
    """Draw each floating text centered on its x, faded by its life.

    Args:
        surface:  Native game surface.
        floaters: Live FloatingText effects from Session.
    """
    font = _font(FONT_SIZE_LG, bold=True)
    for floater in floaters:
        label = font.render(floater.label, True, floater.color)
        label.set_alpha(int(max(0.0, min(1.0, floater.life)) * 255))
        # y is the text baseline; blit from the top
        surface.blit(label, (floater.x - label.get_width() / 2, floater.y - label.get_height()))


# ── Banner ────────────────────────────────────────────────────────────────────

def draw_banner(surface: pygame.Surface, text: str | None) -> None:
    """Draw the state prompt in the top-left corner.

    Args:
        surface: Native game surface.
        text:    Banner text, or None to draw nothing (while playing).
    """
    if not text:
        return
    label = _font(FONT_SIZE_LG).render(text, True, COLOR["text"])
    surface.blit(label, (20, 12))


# ── HUD strip ─────────────────────────────────────────────────────────────────

_HUD_LABELS = {
    "score":     "Score",
    "time":      "Time",
    "goal":      "Goal",
    "status":    None,
    "power_ups": None,
}


def draw_hud(surface: pygame.Surface, readout: Readout, top: int) -> None:
    """Draw the readout fields left to right in a strip at y = top.

    Empty fields are skipped. The power-up summary is highlighted so an
    active effect is noticeable at a glance.

    Args:
        surface: Frame surface that contains the field and the strip.
        readout: Readout the game pushes into.
        top:     Y of the strip's top edge.
    """
    pygame.draw.rect(surface, COLOR["hud"], (0, top, SCREEN_W, HUD_H))
    font = _font(FONT_SIZE_MD)

    x = 16
    for name, text in readout.items():
        if not text:
            continue
        caption = _HUD_LABELS.get(name)
        shown = f"{caption} {text}" if caption else text
        color = COLOR["hud_accent"] if name == "power_ups" else COLOR["text_light"]
        label = font.render(shown, True, color)
        surface.blit(label, (x, top + (HUD_H - label.get_height()) // 2))
        x += label.get_width() + 28
