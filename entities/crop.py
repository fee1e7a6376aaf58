"""
entities/crop.py — Harvestable crops for FarmerHarvest.

Three kinds, looked up in entities/registry.py:
    WHEAT         — 1 point, common
    PUMPKIN       — 3 points, uncommon
    GOLDEN_APPLE  — 5 points, rare

Crops never move. Their only per-frame change is the sway phase that
bends the stem; it has no gameplay effect.
"""

from __future__ import annotations
import math
import pygame

from entities.base import Entity
from entities.registry import CropKind, CropSpec, crop_spec
from settings import CROP_W, CROP_H, COLOR
from utils.color import darker

# Points used to approximate the curved stem
_STEM_SEGMENTS = 8


def _quad_bezier(p0, p1, p2, segments: int = _STEM_SEGMENTS) -> list[tuple[float, float]]:
    """Sample a quadratic bezier curve from p0 to p2 with control point p1."""
    points = []
    for i in range(segments + 1):
        t = i / segments
        u = 1 - t
        x = u * u * p0[0] + 2 * u * t * p1[0] + t * t * p2[0]
        y = u * u * p0[1] + 2 * u * t * p1[1] + t * t * p2[1]
        points.append((x, y))
    return points


class Crop(Entity):
    """A collectible crop.

    Attributes:
        kind:  CropKind of this crop.
        spec:  Fixed CropSpec (value, colors, head size) for the kind.
        value: Points awarded when harvested.
        sway:  Stem animation phase in radians.
    """

    def __init__(self, x: float, y: float, kind: CropKind = CropKind.WHEAT,
                 sway: float = 0.0) -> None:
        super().__init__(x, y, CROP_W, CROP_H)
        self.kind:  CropKind = kind
        self.spec:  CropSpec = crop_spec(kind)
        self.value: int      = self.spec.value
        self.sway:  float    = sway

    def update(self, dt: float) -> None:
        self.sway += dt * 2

    # ── Drawing ───────────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface) -> None:
        cx = self.x + self.w / 2
        stem = _quad_bezier(
            (cx, self.y + self.h),
            (cx + math.sin(self.sway) * 3, self.y + self.h / 2),
            (cx, self.y),
        )
        pygame.draw.lines(surface, self.spec.stem_color, False, stem, 3)

        if self.kind is CropKind.PUMPKIN:
            self._draw_pumpkin(surface, cx)
        elif self.kind is CropKind.GOLDEN_APPLE:
            self._draw_golden_apple(surface, cx)
        else:
            self._draw_wheat(surface, cx)

    def _draw_wheat(self, surface: pygame.Surface, cx: float) -> None:
        size = self.spec.head_size
        head = pygame.Rect(0, 0, size * 2, 12)
        head.center = (round(cx), round(self.y))
        pygame.draw.ellipse(surface, self.spec.head_color, head)

    def _draw_pumpkin(self, surface: pygame.Surface, cx: float) -> None:
        size = self.spec.head_size
        center = (round(cx), round(self.y + 4))
        pygame.draw.circle(surface, self.spec.head_color, center, size)

        # four short ridges around the rim
        ridge = pygame.Rect(0, 0, (size - 2) * 2, (size - 2) * 2)
        ridge.center = center
        ridge_color = darker(self.spec.head_color, 26)
        for i in range(4):
            angle = i * math.pi / 2
            pygame.draw.arc(surface, ridge_color, ridge, angle - 0.2, angle + 0.2, 2)

    def _draw_golden_apple(self, surface: pygame.Surface, cx: float) -> None:
        size = self.spec.head_size
        pygame.draw.circle(surface, self.spec.head_color, (round(cx), round(self.y + 2)), size)
        pygame.draw.circle(surface, COLOR["apple_shine"], (round(cx - 3), round(self.y - 1)), 3)

        # leaf: an ellipse tilted 45 degrees
        leaf = pygame.Surface((6, 12), pygame.SRCALPHA)
        pygame.draw.ellipse(leaf, COLOR["leaf"], leaf.get_rect())
        leaf = pygame.transform.rotate(leaf, -45)
        surface.blit(leaf, leaf.get_rect(center=(round(cx + 4), round(self.y - 4))))
