"""
entities/base.py — Abstract base class for everything on the field.

Farmer, crops, power-ups and scarecrows all share the same shape: a
top-left position, a size, and a dead flag. Each subclass implements its
own draw() and, where it animates or moves, update().

The entity lifecycle is:
    1. core/spawner.py (or Game reset) instantiates an entity
    2. game.py calls update() each frame while the round is PLAYING
    3. game.py calls draw() each frame in every state
    4. On harvest/pickup game.py sets dead = True; the entity is dropped
       from its list during the same frame's cleanup pass

Entities never touch score, timer, or game state. Those belong to
core/session.py, core/timer.py and core/game.py.
"""

from __future__ import annotations
import pygame
from abc import ABC, abstractmethod


class Entity(ABC):
    """Abstract base for all world objects.

    Attributes:
        x:    Left edge in field units.
        y:    Top edge in field units.
        w:    Width in field units.
        h:    Height in field units.
        dead: True once the entity has been harvested or picked up.
    """

    def __init__(self, x: float, y: float, w: float, h: float) -> None:
        self.x:    float = x
        self.y:    float = y
        self.w:    float = w
        self.h:    float = h
        self.dead: bool  = False

    def update(self, dt: float) -> None:
        """Advance per-entity animation by dt seconds.

        Default implementation does nothing. Static entities (scarecrows)
        leave it alone.
        """
        pass

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the entity onto the field surface.

        Must not mutate any entity state.

        Args:
            surface: Native 900x540 pygame Surface.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x:.1f}, y={self.y:.1f})"
