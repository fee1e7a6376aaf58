"""
Tests for RoundTimer and Session.
"""
import pytest

from core.session import Session
from core.timer import RoundTimer
from entities.crop import Crop
from entities.registry import CropKind, crop_spec


class TestRoundTimer:
    """Tests for RoundTimer."""

    def test_counts_down(self):
        timer = RoundTimer(60.0)
        timer.update(0.5)
        assert timer.remaining() == pytest.approx(59.5)
        assert timer.display_seconds() == 60
        assert not timer.is_expired()

    def test_never_negative(self):
        timer = RoundTimer(60.0)
        timer.update(100.0)
        assert timer.remaining() == 0
        assert timer.is_expired()
        assert timer.display_seconds() == 0

    def test_never_above_limit(self):
        timer = RoundTimer(60.0)
        timer.update(-10.0)
        assert timer.remaining() == 60.0

    def test_reset_refills(self):
        timer = RoundTimer(30.0)
        timer.update(29.0)
        timer.reset()
        assert timer.remaining() == timer.limit() == 30.0


class TestSession:
    """Tests for Session scoring and floating texts."""

    def test_harvest_sums_values(self):
        session = Session(goal=15)
        crops = [Crop(30, 30, CropKind.WHEAT), Crop(60, 60, CropKind.GOLDEN_APPLE)]
        assert session.register_harvest(crops) == 6
        assert session.score == 6

    def test_score_not_capped_at_goal(self):
        session = Session(goal=5)
        session.register_harvest([Crop(0, 0, CropKind.GOLDEN_APPLE)] * 3)
        assert session.score == 15
        assert session.reached_goal()

    def test_floater_per_crop(self):
        session = Session()
        crop = Crop(90, 120, CropKind.PUMPKIN)
        session.register_harvest([crop])
        (floater,) = session.floaters
        assert floater.x == 90 + crop.w / 2
        assert floater.y == 120
        assert floater.label == "+3"
        assert floater.color == crop_spec(CropKind.PUMPKIN).head_color
        assert floater.life == 1.0

    def test_floaters_rise_fade_and_expire(self):
        session = Session()
        session.register_harvest([Crop(90, 120)])
        session.update_floaters(0.25)
        (floater,) = session.floaters
        assert floater.life == pytest.approx(0.5)
        assert floater.y == pytest.approx(120 - 7.5)
        session.update_floaters(0.25)
        assert session.floaters == []

    def test_empty_harvest(self):
        session = Session()
        assert session.register_harvest([]) == 0
        assert session.floaters == []

    def test_reset(self):
        session = Session()
        session.register_harvest([Crop(0, 0)])
        session.reset()
        assert session.score == 0
        assert session.floaters == []
