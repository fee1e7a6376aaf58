"""
Tests for the entry point's option parsing and teardown.
"""
import asyncio

import pygame
import pytest

import main


class TestParseArgs:
    """Tests for main.parse_args()."""

    def test_defaults(self):
        args = main.parse_args([])
        assert not args.debug
        assert args.seed is None
        assert args.scale == 1.0

    def test_options(self):
        args = main.parse_args(["--debug", "--seed", "7", "--scale", "1.5"])
        assert args.debug
        assert args.seed == 7
        assert args.scale == 1.5


class TestTeardown:
    """main() must release pygame even when setup fails."""

    def test_quits_when_game_construction_raises(self, monkeypatch):
        quits = []
        monkeypatch.setattr(pygame, "quit", lambda: quits.append(True))

        def broken_game(*args, **kwargs):
            raise RuntimeError("no field")

        monkeypatch.setattr(main, "Game", broken_game)
        with pytest.raises(RuntimeError, match="no field"):
            asyncio.run(main.main([]))
        assert quits == [True]

    def test_quits_when_scaler_raises(self, monkeypatch):
        quits = []
        monkeypatch.setattr(pygame, "quit", lambda: quits.append(True))

        def broken_scaler(*args, **kwargs):
            raise ValueError("bad window")

        monkeypatch.setattr(main, "Scaler", broken_scaler)
        with pytest.raises(ValueError):
            asyncio.run(main.main([]))
        assert quits == [True]
