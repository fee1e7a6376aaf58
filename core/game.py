"""
core/game.py — Central game state machine for FarmerHarvest.

Game owns the top-level state enum and orchestrates all subsystems:
    - Farmer, crops, power-ups and scarecrows
    - RoundTimer (60 second countdown)
    - Session    (score, goal, floating texts)
    - Spawner    (timed crop / power-up spawns)
    - InputState (held keys, pause key)
    - Readout    (optional HUD strings)

States:
    MENU       — field shown, waiting for start
    PLAYING    — round running
    PAUSED     — round frozen, resumable
    GAME_OVER  — time ran out below the goal
    WIN        — goal reached

Transitions:
    MENU       → PLAYING    : start(), resets the world first
    PLAYING    → PAUSED     : pause key / toggle_pause()
    PAUSED     → PLAYING    : pause key / toggle_pause() / start()
    PLAYING    → WIN        : score reaches the goal, or time runs out at/above it
    PLAYING    → GAME_OVER  : time runs out below the goal
    GAME_OVER  → MENU       : reset()
    WIN        → MENU       : reset()

Any command issued in a state not listed above is ignored.

game.py does NOT call pygame.display.flip() or manage the window.
That is main.py's responsibility. Game draws into the surface it was
constructed with, every frame, in every state.
"""

from __future__ import annotations
import logging
from enum import Enum, auto

import pygame

from core.events import EventBus
from core.input import InputState
from core.readout import Readout, READOUT_FIELDS
from core.session import Session
from core.spawner import Spawner
from core.timer import RoundTimer
from entities.crop import Crop
from entities.farmer import Farmer
from entities.power_up import PowerUp
from entities.scarecrow import Scarecrow
from renderer import ui
from renderer.field import draw_field
from settings import (
    FARMER_START, SCARECROW_POSITIONS,
    ROUND_LENGTH_S, GOAL, MAX_FRAME_DT,
    KEYS_START, KEY_RESET,
    STATUS_TEXT, BANNER_TEXT,
)
from utils.geometry import aabb, within_radius

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Top-level state machine states."""
    MENU      = auto()
    PLAYING   = auto()
    PAUSED    = auto()
    GAME_OVER = auto()
    WIN       = auto()


class Game:
    """Orchestrates one play session via a state machine.

    Attributes:
        state:      Current GameState.
        surface:    Native 900x540 surface everything is drawn into.
        bus:        EventBus the game's and input's handlers are subscribed to.
        input:      InputState tracking held keys.
        timer:      RoundTimer for the current round.
        session:    Session with score, goal and floating texts.
        spawner:    Spawner for crops and power-ups.
        player:     The Farmer.
        crops:      Live crops on the field.
        power_ups:  Live power-up pickups on the field.
        obstacles:  Scarecrows; fixed for every round.
        readout:    Optional Readout receiving HUD strings.
    """

    def __init__(
        self,
        surface: pygame.Surface | None,
        readout: Readout | None = None,
        bus: EventBus | None = None,
        spawner: Spawner | None = None,
        round_length: float = ROUND_LENGTH_S,
        goal: int = GOAL,
    ) -> None:
        """Build the world in the MENU state and subscribe to input.

        Args:
            surface:      Drawing surface. Required.
            readout:      Optional HUD readout. Missing fields are tolerated.
            bus:          Event source. A private bus is created if omitted.
            spawner:      Spawner to use; inject one with a seeded RNG for
                          reproducible rounds.
            round_length: Seconds per round.
            goal:         Points needed to win.

        Raises:
            ValueError: If surface is None.
        """
        if surface is None:
            logger.error("no drawing surface given; cannot construct Game")
            raise ValueError("Game requires a drawing surface")

        self.state:     GameState       = GameState.MENU
        self.surface:   pygame.Surface  = surface
        self.bus:       EventBus        = bus or EventBus()
        self.timer:     RoundTimer      = RoundTimer(round_length)
        self.session:   Session         = Session(goal)
        self.spawner:   Spawner         = spawner or Spawner()
        self.player:    Farmer          = Farmer(*FARMER_START)
        self.crops:     list[Crop]      = []
        self.power_ups: list[PowerUp]   = []
        self.obstacles: list[Scarecrow] = []
        self._disposed: bool            = False

        self.readout = readout
        if readout is None:
            logger.warning("no readout given; HUD text will not be shown")
        else:
            for name in READOUT_FIELDS:
                if not readout.has(name):
                    logger.warning("readout field %r not found; it will not be updated", name)

        # Stored once so dispose() removes the same callables it subscribed
        self.input = InputState(self.bus, on_pause=self.toggle_pause)
        self._on_command_key = self.bus.subscribe(pygame.KEYDOWN, self.on_command_key)

        self._reset_world()
        self._set_state(GameState.MENU)

    # ── Readout ───────────────────────────────────────────────────────────────

    def _push(self, name: str, text: str) -> None:
        """Send text to one readout field. Silent no-op if it is missing."""
        if self.readout is not None:
            self.readout.set(name, text)

    def sync_readout(self) -> None:
        """Push score, time, goal and power-up summary to the readout."""
        self._push("score", str(self.score))
        self._push("time", str(self.timer.display_seconds()))
        self._push("goal", str(self.goal))
        self._push("power_ups", self.player.power_up_summary())

    # ── Convenience reads ─────────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def goal(self) -> int:
        return self.session.goal

    @property
    def time_left(self) -> float:
        return self.timer.remaining()

    # ── State transitions ─────────────────────────────────────────────────────

    def _set_state(self, state: GameState) -> None:
        if state is not self.state:
            logger.debug("state %s -> %s", self.state.name, state.name)
        self.state = state
        self._push("status", STATUS_TEXT[state.name])

    def _reset_world(self) -> None:
        """Rebuild every entity and zero score, timer and spawn accumulators."""
        self.player = Farmer(*FARMER_START)
        self.crops.clear()
        self.power_ups.clear()
        self.obstacles[:] = [Scarecrow(x, y) for x, y in SCARECROW_POSITIONS]
        self.session.reset()
        self.timer.reset()
        self.spawner.reset()
        self.input.clear()
        self.sync_readout()

    def start(self) -> None:
        """Start a round from MENU, or resume from PAUSED."""
        if self.state is GameState.MENU:
            self._reset_world()
            self._set_state(GameState.PLAYING)
        elif self.state is GameState.PAUSED:
            self._set_state(GameState.PLAYING)
        else:
            logger.debug("start ignored in %s", self.state.name)

    def reset(self) -> None:
        """Return to MENU after a finished round, with a fresh world."""
        if self.state in (GameState.GAME_OVER, GameState.WIN):
            self._reset_world()
            self._set_state(GameState.MENU)
        else:
            logger.debug("reset ignored in %s", self.state.name)

    def pause(self) -> None:
        if self.state is GameState.PLAYING:
            self._set_state(GameState.PAUSED)

    def resume(self) -> None:
        if self.state is GameState.PAUSED:
            self._set_state(GameState.PLAYING)

    def toggle_pause(self) -> None:
        """Flip between PLAYING and PAUSED. Ignored in any other state."""
        if self.state is GameState.PLAYING:
            self.pause()
        elif self.state is GameState.PAUSED:
            self.resume()

    def _finish_round(self) -> None:
        """Resolve the round outcome once the timer hits zero."""
        self._set_state(GameState.WIN if self.session.reached_goal() else GameState.GAME_OVER)
        self.sync_readout()

    # ── Event handling ────────────────────────────────────────────────────────

    def on_command_key(self, event: pygame.event.Event) -> None:
        """Map start / reset keys to commands."""
        if event.key in KEYS_START:
            self.start()
        elif event.key == KEY_RESET:
            self.reset()

    # ── Per-frame update ──────────────────────────────────────────────────────

    def tick(self, elapsed: float) -> None:
        """Run one full frame: clamp elapsed time, update, then render.

        Args:
            elapsed: Real seconds since the previous frame.
        """
        dt = min(max(elapsed, 0.0), MAX_FRAME_DT)
        self.update(dt)
        self.render()

    def update(self, dt: float) -> None:
        """Advance the simulation by dt seconds. No-op unless PLAYING.

        Args:
            dt: Delta time in seconds, already clamped by tick().
        """
        if self.state is not GameState.PLAYING:
            return

        self.timer.update(dt)
        if self.timer.is_expired():
            self._finish_round()
            return

        # Player input & movement
        self.player.handle_input(self.input)
        self.player.update(dt, self.obstacles)

        # Spawning
        new_crops, new_power_ups = self.spawner.update(dt)
        self.crops.extend(new_crops)
        self.power_ups.extend(new_power_ups)

        # Harvest: area (scythe) or box overlap
        if self.player.has_scythe:
            radius = self.player.collect_radius
            harvested = [c for c in self.crops if within_radius(self.player, c, radius)]
        else:
            harvested = [c for c in self.crops if aabb(self.player, c)]
        for crop in harvested:
            crop.dead = True
        if harvested:
            points = self.session.register_harvest(harvested)
            logger.debug("harvested %d crop(s) for %d point(s)", len(harvested), points)

        # Power-up pickup
        for power_up in self.power_ups:
            if aabb(self.player, power_up):
                power_up.dead = True
                self.player.add_power_up(power_up)
                logger.debug("picked up %s", power_up.kind.name)

        # Clean up dead entities, animate the rest
        self.crops = [c for c in self.crops if not c.dead]
        self.power_ups = [p for p in self.power_ups if not p.dead]
        for crop in self.crops:
            crop.update(dt)
        for power_up in self.power_ups:
            power_up.update(dt)

        self.session.update_floaters(dt)

        if self.session.reached_goal():
            self._set_state(GameState.WIN)

        self.sync_readout()

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self) -> None:
        """Draw the current world and state banner onto the surface.

        Layer order keeps the farmer above everything on the field.
        Never mutates game state.
        """
        surface = self.surface
        draw_field(surface)

        for crop in self.crops:
            crop.draw(surface)
        for power_up in self.power_ups:
            power_up.draw(surface)
        for obstacle in self.obstacles:
            obstacle.draw(surface)
        self.player.draw(surface)

        ui.draw_floaters(surface, self.session.floaters)
        ui.draw_banner(surface, BANNER_TEXT.get(self.state.name))

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def dispose(self) -> None:
        """Unsubscribe every event handler. Safe to call more than once."""
        if self._disposed:
            return
        self.input.dispose()
        self.bus.unsubscribe(pygame.KEYDOWN, self._on_command_key)
        self._disposed = True
        logger.debug("game disposed")
