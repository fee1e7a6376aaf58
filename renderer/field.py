"""
renderer/field.py — Background layer for FarmerHarvest.

Grass fill plus the faint tile grid that crops and power-ups snap to.
The grid never changes, so it is drawn once into a cached surface and
blitted every frame.
"""

from __future__ import annotations
import pygame
from settings import SCREEN_W, SCREEN_H, TILE, COLOR

_background: pygame.Surface | None = None


def _build_background() -> pygame.Surface:
    """Render the grass and grid lines into a new surface."""
    background = pygame.Surface((SCREEN_W, SCREEN_H))
    background.fill(COLOR["field"])
    for y in range(TILE, SCREEN_H, TILE):
        pygame.draw.line(background, COLOR["field_line"], (0, y), (SCREEN_W, y), 1)
    for x in range(TILE, SCREEN_W, TILE):
        pygame.draw.line(background, COLOR["field_line"], (x, 0), (x, SCREEN_H), 1)
    return background


def draw_field(surface: pygame.Surface) -> None:
    """Clear the surface to the grass-and-grid background.

    Args:
        surface: Native 900x540 game surface.
    """
    global _background
    if _background is None:
        _background = _build_background()
    surface.blit(_background, (0, 0))
