"""
Tests for accumulator-driven spawning.
"""
import random
from collections import Counter

from core.spawner import Spawner
from entities.registry import CropKind, PowerUpKind
from settings import SCREEN_W, SCREEN_H, TILE


class TestSpawnRate:
    """Tests for the spawn accumulators."""

    def test_no_spawn_before_interval(self):
        spawner = Spawner(random.Random(1))
        crops, power_ups = spawner.update(0.5)
        assert crops == [] and power_ups == []

    def test_one_crop_per_interval(self):
        spawner = Spawner(random.Random(1))
        crops, _ = spawner.update(0.8)
        assert len(crops) == 1

    def test_long_frame_spawns_several(self):
        """A long frame catches up instead of dropping spawns."""
        spawner = Spawner(random.Random(1))
        crops, power_ups = spawner.update(12.5)
        assert len(crops) == 15
        assert len(power_ups) == 1

    def test_rate_independent_of_frame_size(self):
        small = Spawner(random.Random(1))
        large = Spawner(random.Random(1))
        small_total = sum(len(small.update(0.01)[0]) for _ in range(1000))
        large_total = sum(len(large.update(0.5)[0]) for _ in range(20))
        assert small_total == large_total == 12

    def test_reset_clears_accumulators(self):
        spawner = Spawner(random.Random(1))
        spawner.update(0.7)
        spawner.reset()
        crops, _ = spawner.update(0.7)
        assert crops == []


class TestSpawnPlacement:
    """Tests for positions and kinds."""

    def test_positions_on_inner_grid(self):
        spawner = Spawner(random.Random(3))
        for _ in range(300):
            crop = spawner.spawn_crop()
            assert crop.x % TILE == 0 and crop.y % TILE == 0
            assert TILE <= crop.x <= SCREEN_W - 2 * TILE
            assert TILE <= crop.y <= SCREEN_H - 2 * TILE

    def test_kinds_follow_weights(self):
        spawner = Spawner(random.Random(5))
        counts = Counter(spawner.spawn_crop().kind for _ in range(2000))
        assert counts[CropKind.WHEAT] > counts[CropKind.PUMPKIN] > counts[CropKind.GOLDEN_APPLE] > 0

    def test_both_power_up_kinds_appear(self):
        spawner = Spawner(random.Random(5))
        kinds = {spawner.spawn_power_up().kind for _ in range(50)}
        assert kinds == {PowerUpKind.SPEED, PowerUpKind.SCYTHE}

    def test_same_seed_same_spawns(self):
        a = Spawner(random.Random(9))
        b = Spawner(random.Random(9))
        for _ in range(20):
            ca, cb = a.spawn_crop(), b.spawn_crop()
            assert (ca.x, ca.y, ca.kind, ca.sway) == (cb.x, cb.y, cb.kind, cb.sway)
