"""
Shared fixtures. Runs pygame headless so surfaces and fonts work in CI.
"""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from core.events import EventBus
from core.game import Game
from core.readout import Readout
from core.spawner import Spawner
from settings import SCREEN_W, SCREEN_H


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def surface():
    return pygame.Surface((SCREEN_W, SCREEN_H))


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def readout():
    return Readout()


@pytest.fixture
def quiet_spawner():
    """Spawner that never fires, so tests control every entity."""
    return Spawner(random.Random(0), crop_every=1e9, power_up_every=1e9)


@pytest.fixture
def game(surface, readout, bus, quiet_spawner):
    game = Game(surface, readout=readout, bus=bus, spawner=quiet_spawner)
    yield game
    game.dispose()


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)
