"""
core/spawner.py — Timed crop and power-up spawning for FarmerHarvest.

The spawner is the only place that knows about the full set of crop and
power-up kinds. It reads from entities/registry.py and applies two rules:

    1. Fixed rate — each category has its own accumulator. Elapsed time is
       added every frame, and every whole interval in the accumulator
       yields one spawn. A long frame can therefore spawn more than one
       entity, which keeps the average rate independent of frame time.
    2. Weighted pick — the kind is sampled by the registry base_weight.

Positions are uniform over the field's tile grid, one tile in from every
edge. Overlap with other entities is allowed.

All randomness goes through the injected random.Random so a fixed seed
reproduces a round exactly.
"""

from __future__ import annotations
import logging
import math
import random
from typing import TypeVar

from entities.crop import Crop
from entities.power_up import PowerUp
from entities.registry import CROP_REGISTRY, POWER_UP_REGISTRY
from settings import (
    SCREEN_W, SCREEN_H, TILE,
    CROP_SPAWN_EVERY_S, POWER_UP_SPAWN_EVERY_S,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")


class Spawner:
    """Accumulator-driven spawner for crops and power-ups.

    Attributes:
        rng:             Random source for positions, kinds and sway phases.
        crop_every:      Seconds between crop spawns.
        power_up_every:  Seconds between power-up spawns.
        _crop_accum:     Seconds accumulated toward the next crop.
        _power_up_accum: Seconds accumulated toward the next power-up.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        crop_every: float = CROP_SPAWN_EVERY_S,
        power_up_every: float = POWER_UP_SPAWN_EVERY_S,
    ) -> None:
        self.rng            = rng or random.Random()
        self.crop_every     = crop_every
        self.power_up_every = power_up_every
        self._crop_accum:     float = 0.0
        self._power_up_accum: float = 0.0

    def reset(self) -> None:
        """Clear both accumulators. Call on every round reset."""
        self._crop_accum = 0.0
        self._power_up_accum = 0.0

    def update(self, dt: float) -> tuple[list[Crop], list[PowerUp]]:
        """Accumulate dt and return everything due to spawn this frame.

        Args:
            dt: Delta time in seconds.

        Returns:
            (new_crops, new_power_ups). Either list may be empty.
        """
        crops: list[Crop] = []
        self._crop_accum += dt
        while self._crop_accum >= self.crop_every:
            self._crop_accum -= self.crop_every
            crops.append(self.spawn_crop())

        power_ups: list[PowerUp] = []
        self._power_up_accum += dt
        while self._power_up_accum >= self.power_up_every:
            self._power_up_accum -= self.power_up_every
            power_ups.append(self.spawn_power_up())

        return crops, power_ups

    def spawn_crop(self) -> Crop:
        """Return a crop of a weighted-random kind at a random grid cell."""
        x, y = self._grid_position()
        kind = self._pick(CROP_REGISTRY)
        crop = Crop(x, y, kind, sway=self.rng.random() * math.tau)
        logger.debug("spawned %s at (%d, %d)", kind.name, x, y)
        return crop

    def spawn_power_up(self) -> PowerUp:
        """Return a power-up of a weighted-random kind at a random grid cell."""
        x, y = self._grid_position()
        kind = self._pick(POWER_UP_REGISTRY)
        logger.debug("spawned power-up %s at (%d, %d)", kind.name, x, y)
        return PowerUp(x, y, kind)

    def _grid_position(self) -> tuple[int, int]:
        """Return a random tile corner, one tile in from every edge."""
        cols = (SCREEN_W - 2 * TILE) // TILE
        rows = (SCREEN_H - 2 * TILE) // TILE
        return (
            self.rng.randrange(cols) * TILE + TILE,
            self.rng.randrange(rows) * TILE + TILE,
        )

    def _pick(self, registry: dict[K, tuple[object, int]]) -> K:
        kinds   = list(registry.keys())
        weights = [registry[k][1] for k in kinds]
        return self.rng.choices(kinds, weights=weights, k=1)[0]
