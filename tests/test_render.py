"""
Tests for drawing: every state renders, and rendering never mutates the model.
"""
import pygame
import pytest

from conftest import key_down
from core.game import GameState
from core.readout import Readout
from entities.crop import Crop
from entities.power_up import PowerUp
from entities.registry import CropKind, PowerUpKind
from renderer.ui import draw_hud
from settings import COLOR, SCREEN_W, SCREEN_H, HUD_H, ROUND_LENGTH_S, KEY_PAUSE
from utils.scaler import Scaler


def model_state(game):
    return (
        game.state, game.score, game.time_left,
        game.player.x, game.player.y,
        [(c.x, c.y, c.sway) for c in game.crops],
        [(p.x, p.y, p.pulse) for p in game.power_ups],
        [(f.x, f.y, f.life) for f in game.session.floaters],
    )


def populate(game):
    for i, kind in enumerate(CropKind):
        game.crops.append(Crop(60 + i * 60, 90, kind, sway=0.3))
    for i, kind in enumerate(PowerUpKind):
        game.power_ups.append(PowerUp(60 + i * 60, 180, kind))
    game.player.add_power_up(PowerUp(0, 0, PowerUpKind.SPEED))
    game.player.add_power_up(PowerUp(0, 0, PowerUpKind.SCYTHE))
    game.player.update_power_ups(0.0)


class TestGameRender:
    """Tests for Game.render()."""

    @pytest.mark.parametrize("target", list(GameState))
    def test_render_every_state_without_mutation(self, game, bus, target):
        if target is not GameState.MENU:
            game.start()
        populate(game)
        crop = Crop(game.player.x, game.player.y, CropKind.PUMPKIN)
        game.crops.append(crop)
        if target is not GameState.MENU:
            game.update(0.01)          # leaves a floating text behind
        if target is GameState.PAUSED:
            bus.dispatch(key_down(KEY_PAUSE))
        elif target is GameState.GAME_OVER:
            game.update(ROUND_LENGTH_S)
        elif target is GameState.WIN:
            game.session.score = game.goal
            game.crops.append(Crop(game.player.x, game.player.y))
            game.update(0.01)
        assert game.state is target

        before = model_state(game)
        game.render()
        game.render()
        assert model_state(game) == before

    def test_field_background_drawn(self, game, surface):
        surface.fill((0, 0, 0))
        game.render()
        assert surface.get_at((1, 1))[:3] == COLOR["field"]
        assert surface.get_at((1, 30))[:3] == COLOR["field_line"]

    def test_tick_renders_in_menu(self, game, surface):
        surface.fill((0, 0, 0))
        game.tick(0.016)
        assert game.state is GameState.MENU
        assert surface.get_at((1, 1))[:3] == COLOR["field"]


class TestHud:
    """Tests for the HUD strip."""

    def test_draws_strip(self):
        frame = pygame.Surface((SCREEN_W, SCREEN_H + HUD_H))
        readout = Readout()
        readout.set("score", "7")
        readout.set("power_ups", "Scythe: 3s")
        draw_hud(frame, readout, top=SCREEN_H)
        assert frame.get_at((SCREEN_W - 1, SCREEN_H + 1))[:3] == COLOR["hud"]
        assert frame.get_at((1, 1))[:3] == (0, 0, 0)

    def test_partial_readout(self):
        frame = pygame.Surface((SCREEN_W, SCREEN_H + HUD_H))
        draw_hud(frame, Readout(fields=("status",)), top=SCREEN_H)


class TestScaler:
    """Tests for window letterboxing."""

    def test_exact_multiple(self):
        scaler = Scaler((900, 580), (1800, 1160))
        assert scaler.scale == 2
        assert scaler.dest_rect == pygame.Rect(0, 0, 1800, 1160)

    def test_letterbox_vertical_bars(self):
        scaler = Scaler((900, 580), (1000, 1160))
        assert scaler.dest_rect.width == 1000
        assert scaler.dest_rect.height == 644
        assert scaler.dest_rect.y == (1160 - 644) // 2

    def test_resize_event(self):
        scaler = Scaler((900, 580), (900, 580))
        scaler.on_resize(pygame.event.Event(pygame.VIDEORESIZE, w=450, h=1000, size=(450, 1000)))
        assert scaler.scale == 0.5
        assert scaler.dest_rect.size == (450, 290)

    def test_zero_window_ignored(self):
        scaler = Scaler((900, 580), (900, 580))
        scaler.fit(0, 0)
        assert scaler.scale == 1.0

    def test_blit(self):
        window = pygame.Surface((1000, 1000))
        frame = pygame.Surface((900, 580))
        frame.fill((10, 200, 30))
        scaler = Scaler((900, 580), window.get_size())
        scaler.blit(window, frame)
        assert window.get_at((0, 0))[:3] == (0, 0, 0)
        assert window.get_at((500, 500))[:3] == (10, 200, 30)
