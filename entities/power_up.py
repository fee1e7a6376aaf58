"""
entities/power_up.py — Temporary buff pickups for FarmerHarvest.

A PowerUp on the field is only a carrier. When the farmer touches it,
game.py flags it dead and Farmer.add_power_up() copies the kind and a
fresh timer into the farmer's own mapping. Nothing keeps a reference to
the pickup after that.
"""

from __future__ import annotations
import math
import pygame

from entities.base import Entity
from entities.registry import PowerUpKind, PowerUpSpec, power_up_spec
from settings import POWER_UP_W, POWER_UP_H
from utils.color import with_alpha


class PowerUp(Entity):
    """A glowing pickup that grants a timed effect.

    Attributes:
        kind:     PowerUpKind of this pickup.
        spec:     Fixed PowerUpSpec for the kind.
        duration: Seconds the effect lasts once picked up.
        pulse:    Glow animation phase in radians.
    """

    def __init__(self, x: float, y: float, kind: PowerUpKind = PowerUpKind.SPEED) -> None:
        super().__init__(x, y, POWER_UP_W, POWER_UP_H)
        self.kind:     PowerUpKind = kind
        self.spec:     PowerUpSpec = power_up_spec(kind)
        self.duration: float       = self.spec.duration
        self.pulse:    float       = 0.0

    def update(self, dt: float) -> None:
        # glow cycles faster than crop sway so pickups stand out
        self.pulse += dt * 4

    def glow(self) -> float:
        """Return the current aura opacity, oscillating in [0.4, 1.0]."""
        return (math.sin(self.pulse) + 1) * 0.3 + 0.4

    def draw(self, surface: pygame.Surface) -> None:
        color = self.spec.color
        cx = self.x + self.w / 2
        cy = self.y + self.h / 2

        radius = int(self.w / 2 + 2)
        aura = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(aura, with_alpha(color, self.glow()), (radius, radius), radius)
        surface.blit(aura, (round(cx - radius), round(cy - radius)))

        if self.kind is PowerUpKind.SPEED:
            bolt = [
                (cx - 4, self.y + 4),
                (cx + 2, cy - 2),
                (cx - 2, cy),
                (cx + 4, self.y + self.h - 4),
                (cx - 2, cy + 2),
                (cx + 2, cy),
            ]
            pygame.draw.polygon(surface, color, bolt)
        elif self.kind is PowerUpKind.SCYTHE:
            blade = pygame.Rect(0, 0, 12, 12)
            blade.center = (round(cx), round(cy - 3))
            pygame.draw.arc(surface, color, blade, 0, math.pi, 3)
            pygame.draw.line(surface, color, (cx, cy + 3), (cx, self.y + self.h - 2), 3)
