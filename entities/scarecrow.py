"""
entities/scarecrow.py — Static obstacle. Blocks the farmer, nothing else.
"""

from __future__ import annotations
import pygame

from entities.base import Entity
from settings import SCARECROW_W, SCARECROW_H, COLOR


class Scarecrow(Entity):
    """Immovable obstacle placed at round reset and never removed."""

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y, SCARECROW_W, SCARECROW_H)

    def draw(self, surface: pygame.Surface) -> None:
        cx = self.x + self.w / 2

        # pole
        pygame.draw.rect(surface, COLOR["pole"], (cx - 3, self.y, 6, self.h))
        # head
        pygame.draw.circle(surface, COLOR["straw"], (round(cx), round(self.y + 10)), 10)
        # arms
        pygame.draw.line(surface, COLOR["arms"],
                         (self.x, self.y + 18), (self.x + self.w, self.y + 18), 4)
