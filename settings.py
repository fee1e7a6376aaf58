"""
settings.py — Global constants for FarmerHarvest.

All magic numbers live here. No other module should hardcode colors,
dimensions, timings, or key bindings. Import what you need with:
    from settings import COLOR, SCREEN_W, ...
"""

import pygame

# ── Screen ────────────────────────────────────────────────────────────────────
SCREEN_W = 900
SCREEN_H = 540
FPS = 60
TITLE = "FarmerHarvest"

# Longest simulated step per frame. Larger gaps (tab switch, debugger)
# are truncated so entities never jump through obstacles.
MAX_FRAME_DT = 0.033

# ── Field ─────────────────────────────────────────────────────────────────────
TILE = 30   # grid spacing; crops and power-ups snap to it

# ── Round ─────────────────────────────────────────────────────────────────────
ROUND_LENGTH_S = 60.0
GOAL = 15

# ── Spawning ──────────────────────────────────────────────────────────────────
CROP_SPAWN_EVERY_S     = 0.8
POWER_UP_SPAWN_EVERY_S = 12.0

# ── Farmer ────────────────────────────────────────────────────────────────────
FARMER_W     = 34
FARMER_H     = 34
FARMER_SPEED = 260.0                     # units per second
FARMER_START = (SCREEN_W / 2 - 17, SCREEN_H - 80)

# ── Scarecrows ────────────────────────────────────────────────────────────────
SCARECROW_W = 26
SCARECROW_H = 46
SCARECROW_POSITIONS = ((200, 220), (650, 160))

# ── Pickups ───────────────────────────────────────────────────────────────────
CROP_W     = 20
CROP_H     = 26
POWER_UP_W = 24
POWER_UP_H = 24
POWER_UP_DURATION_S = 8.0

# ── Floating score text ───────────────────────────────────────────────────────
FLOATER_FADE_PER_S = 2.0     # life lost per second (life starts at 1.0)
FLOATER_RISE_PER_S = 30.0    # upward drift in units per second

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "field":         (223, 240, 213),   # #DFF0D5
    "field_line":    (199, 224, 189),   # #C7E0BD
    "text":          ( 51,  51,  51),   # #333333
    "text_light":    (255, 255, 255),
    "hud":           ( 62,  92,  48),   # #3E5C30
    "hud_accent":    (255, 213,  79),   # #FFD54F — active power-ups
    "farmer":        (139,  90,  43),   # #8B5A2B
    "hat":           (194, 142,  14),   # #C28E0E
    "wheat_stem":    ( 47, 125,  50),   # #2F7D32
    "wheat_head":    (217, 164,  65),   # #D9A441
    "pumpkin_stem":  ( 74, 124,  89),   # #4A7C59
    "pumpkin_head":  (255, 111,   0),   # #FF6F00
    "apple_stem":    ( 47, 125,  50),
    "apple_head":    (255, 215,   0),   # #FFD700
    "apple_shine":   (255, 239,  61),   # #FFEF3D
    "leaf":          ( 76, 175,  80),   # #4CAF50
    "speed":         (  0, 188, 212),   # #00BCD4
    "scythe":        (255,  87,  34),   # #FF5722
    "pole":          (155, 118,  83),   # #9B7653
    "straw":         (194, 142,  14),   # #C28E0E
    "arms":          (107,  79,  42),   # #6B4F2A
}

# ── Keys ──────────────────────────────────────────────────────────────────────
KEYS_LEFT  = (pygame.K_LEFT,  pygame.K_a)
KEYS_RIGHT = (pygame.K_RIGHT, pygame.K_d)
KEYS_UP    = (pygame.K_UP,    pygame.K_w)
KEYS_DOWN  = (pygame.K_DOWN,  pygame.K_s)
KEY_PAUSE  = pygame.K_p
KEYS_START = (pygame.K_RETURN, pygame.K_SPACE)
KEY_RESET  = pygame.K_r
KEY_QUIT   = pygame.K_ESCAPE

# ── Text ──────────────────────────────────────────────────────────────────────
STATUS_TEXT = {
    "MENU":      "Menu",
    "PLAYING":   "Playing…",
    "PAUSED":    "Paused",
    "GAME_OVER": "Game Over",
    "WIN":       "You Win!",
}

BANNER_TEXT = {
    "MENU":      "Press Enter to start",
    "PAUSED":    "Paused (press P to resume)",
    "GAME_OVER": "Time up! Press R to return to the menu",
    "WIN":       "Harvest complete! Press R for another round",
}

POWER_UP_SEPARATOR = " | "

# ── HUD strip (below the playfield, drawn by the bootstrap) ──────────────────
HUD_H = 40

# ── Fonts ─────────────────────────────────────────────────────────────────────
FONT_FAMILY  = "verdana,dejavusans,arial"
FONT_SIZE_LG = 16
FONT_SIZE_MD = 14
