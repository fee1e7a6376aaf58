"""
entities/farmer.py — The player character for FarmerHarvest.

Farmer owns its position, velocity and active power-up timers. Each frame
game.py calls, in order:
    farmer.handle_input(input_state)   # held keys → direction
    farmer.update(dt, obstacles)       # tick power-ups, then move

Speed and the area-harvest radius are derived values. update() rebuilds
both from active_power_ups every frame, so an effect disappears on the
same frame its timer runs out.

Movement is all-or-nothing: if the clamped move would overlap any
obstacle, the farmer stays exactly where it was. There is no sliding
along one axis.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable

import pygame

from entities.base import Entity
from entities.power_up import PowerUp
from entities.registry import PowerUpKind, PowerUpSpec
from settings import (
    SCREEN_W, SCREEN_H,
    FARMER_W, FARMER_H, FARMER_SPEED,
    KEYS_LEFT, KEYS_RIGHT, KEYS_UP, KEYS_DOWN,
    POWER_UP_SEPARATOR,
    COLOR,
)
from utils.color import with_alpha
from utils.geometry import aabb, clamp


@dataclass
class ActivePowerUp:
    """A running effect on the farmer.

    Attributes:
        time_left: Seconds until the effect ends.
        spec:      The kind's fixed parameters, copied at pickup time.
    """
    time_left: float
    spec:      PowerUpSpec


class Farmer(Entity):
    """Player-controlled farmer.

    Attributes:
        base_speed:      Speed in units/s with no boosts.
        speed:           Current speed, base_speed times any active multiplier.
        dir_x:           Held horizontal direction, -1, 0 or 1.
        dir_y:           Held vertical direction, -1, 0 or 1.
        vx:              Horizontal velocity in units/s.
        vy:              Vertical velocity in units/s.
        active_power_ups: Mapping of PowerUpKind → ActivePowerUp. One entry per kind.
        collect_radius:  Area-harvest radius while a scythe is active, else None.
    """

    def __init__(self, x: float, y: float, base_speed: float = FARMER_SPEED) -> None:
        super().__init__(x, y, FARMER_W, FARMER_H)
        self.base_speed: float = base_speed
        self.speed:      float = base_speed
        self.dir_x:      int   = 0
        self.dir_y:      int   = 0
        self.vx:         float = 0.0
        self.vy:         float = 0.0
        self.active_power_ups: dict[PowerUpKind, ActivePowerUp] = {}
        self.collect_radius: float | None = None

    @property
    def has_scythe(self) -> bool:
        """True while area harvesting is active."""
        return self.collect_radius is not None

    # ── Movement ──────────────────────────────────────────────────────────────

    def handle_input(self, input_state) -> None:
        """Read the held movement direction.

        Each axis resolves to (positive held) - (negative held), so opposite
        keys cancel out. Diagonals are not normalised. Velocity is scaled
        by speed in update(), after power-ups have been ticked.

        Args:
            input_state: core.input.InputState (anything with axis()).
        """
        self.dir_x = input_state.axis(KEYS_LEFT, KEYS_RIGHT)
        self.dir_y = input_state.axis(KEYS_UP, KEYS_DOWN)
        self.vx = self.dir_x * self.speed
        self.vy = self.dir_y * self.speed

    def update(self, dt: float, obstacles: Iterable[Entity] = ()) -> None:
        """Tick power-ups, then move with obstacle blocking.

        Args:
            dt:        Delta time in seconds.
            obstacles: Entities the farmer may not overlap after moving.
        """
        self.update_power_ups(dt)
        # speed may have just dropped back to base
        self.vx = self.dir_x * self.speed
        self.vy = self.dir_y * self.speed

        old_x, old_y = self.x, self.y
        self.x = clamp(self.x + self.vx * dt, 0, SCREEN_W - self.w)
        self.y = clamp(self.y + self.vy * dt, 0, SCREEN_H - self.h)

        if any(aabb(self, o) for o in obstacles):
            self.x, self.y = old_x, old_y

    # ── Power-ups ─────────────────────────────────────────────────────────────

    def update_power_ups(self, dt: float) -> None:
        """Tick down every active effect and rebuild derived stats.

        Expired kinds are collected first and removed afterwards so the
        mapping is never resized while it is being iterated.

        Args:
            dt: Delta time in seconds.
        """
        self.speed = self.base_speed
        self.collect_radius = None

        expired = []
        for kind, active in self.active_power_ups.items():
            active.time_left -= dt
            if active.time_left <= 0:
                expired.append(kind)
                continue
            self.speed *= active.spec.multiplier
            if active.spec.collect_radius is not None:
                self.collect_radius = active.spec.collect_radius

        for kind in expired:
            del self.active_power_ups[kind]

    def add_power_up(self, power_up: PowerUp) -> None:
        """Start (or restart) the effect carried by a picked-up PowerUp.

        A second pickup of a kind that is already running replaces its
        timer rather than stacking.
        """
        self.active_power_ups[power_up.kind] = ActivePowerUp(
            time_left=power_up.duration,
            spec=power_up.spec,
        )

    def power_up_summary(self) -> str:
        """Return the HUD string for active effects, e.g. "Scythe: 5s".

        Returns:
            Effects joined by POWER_UP_SEPARATOR, or "" when none are active.
        """
        return POWER_UP_SEPARATOR.join(
            f"{active.spec.effect}: {math.ceil(active.time_left)}s"
            for active in self.active_power_ups.values()
        )

    # ── Drawing ───────────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface) -> None:
        x, y, w, h = self.x, self.y, self.w, self.h

        pygame.draw.rect(surface, COLOR["farmer"], (x, y, w, h))
        pygame.draw.rect(surface, COLOR["hat"], (x + 4, y - 6, w - 8, 8))      # brim
        pygame.draw.rect(surface, COLOR["hat"], (x + 10, y - 18, w - 20, 12))  # crown

        if self.has_scythe:
            r = int(self.collect_radius)
            ring = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
            pygame.draw.circle(ring, with_alpha(COLOR["scythe"], 0.6), (r, r), r, 2)
            surface.blit(ring, (round(x + w / 2 - r), round(y + h / 2 - r)))

        if PowerUpKind.SPEED in self.active_power_ups:
            trail = pygame.Surface((4, 18), pygame.SRCALPHA)
            trail.fill(with_alpha(COLOR["speed"], 0.4))
            surface.blit(trail, (round(x - 2), round(y + 8)))
            surface.blit(trail, (round(x + w - 2), round(y + 8)))
