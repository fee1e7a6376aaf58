"""
main.py — Entry point and frame loop for FarmerHarvest.

Responsibilities:
    - Parse command-line options and configure logging
    - Initialise pygame and create the window
    - Own the frame surface (field + HUD strip) and the Scaler
    - Run the main loop: dispatch events → tick game → draw HUD → flip
    - Tear the game down exactly once on exit

Architecture note:
    main.py is intentionally thin. It owns the pygame lifecycle, the
    window and the HUD readout — nothing else. All game logic lives in
    core/game.py, which only ever sees the 900x540 field surface.

pygbag compatibility:
    The loop is an async function driven by asyncio.run(). pygbag swaps
    in its own event loop that yields to the browser on every
    asyncio.sleep(0), so one iteration is one animation frame.

Usage (local):
    python main.py [--debug] [--seed N] [--scale S]

Usage (WASM export):
    pygbag .
"""

import argparse
import asyncio
import logging
import random

import pygame
from settings import SCREEN_W, SCREEN_H, HUD_H, FPS, TITLE, KEY_QUIT
from utils.scaler import Scaler
from core.events import EventBus
from core.game import Game
from core.readout import Readout
from core.spawner import Spawner
from renderer.ui import draw_hud

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line options.

    Args:
        argv: Argument list; defaults to sys.argv[1:].

    Returns:
        Namespace with debug, seed and scale.
    """
    parser = argparse.ArgumentParser(description=f"{TITLE} — harvest crops before time runs out")
    parser.add_argument("--debug", action="store_true", help="Log state changes and spawns")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible spawns")
    parser.add_argument("--scale", type=float, default=1.0, help="Initial window scale factor")
    return parser.parse_args(argv)


async def main(argv=None) -> None:
    """Async main loop — compatible with both CPython and pygbag WASM.

    Initialises pygame, creates all subsystems, then runs the game loop.
    Each iteration yields to the event loop via asyncio.sleep(0), which
    pygbag uses to hand control back to the browser.
    """
    args = parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        datefmt="%d-%b-%y %H:%M:%S",
        level=logging.DEBUG if args.debug else logging.WARNING,
    )

    game = None
    bus = EventBus()
    on_resize = on_blur = None

    pygame.init()
    try:
        # ── Window setup ──────────────────────────────────────────────────────
        frame_size = (SCREEN_W, SCREEN_H + HUD_H)
        window = pygame.display.set_mode(
            (int(frame_size[0] * args.scale), int(frame_size[1] * args.scale)),
            pygame.RESIZABLE,
        )
        pygame.display.set_caption(TITLE)

        # Field on top, HUD strip below; the game only sees the field subsurface
        frame = pygame.Surface(frame_size)
        field = frame.subsurface((0, 0, SCREEN_W, SCREEN_H))
        scaler = Scaler(frame_size, window.get_size())

        # ── Subsystems ────────────────────────────────────────────────────────
        readout = Readout()
        rng     = random.Random(args.seed)
        game    = Game(field, readout=readout, bus=bus,
                       spawner=Spawner(rng))

        on_resize = bus.subscribe(pygame.VIDEORESIZE, scaler.on_resize)
        on_blur   = bus.subscribe(pygame.WINDOWFOCUSLOST, lambda _event: game.input.clear())

        clock = pygame.time.Clock()
        logger.info("started (seed=%s)", args.seed)

        # ── Main loop ─────────────────────────────────────────────────────────
        running = True
        while running:
            elapsed = clock.tick(FPS) / 1000.0   # seconds since last frame

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == KEY_QUIT:
                    running = False
                else:
                    bus.dispatch(event)

            game.tick(elapsed)                   # clamps, updates, renders field
            draw_hud(frame, readout, top=SCREEN_H)
            scaler.blit(window, frame)
            pygame.display.flip()

            await asyncio.sleep(0)
    finally:
        # Setup may have failed part-way; undo only what was built
        if game is not None:
            game.dispose()
        if on_resize is not None:
            bus.unsubscribe(pygame.VIDEORESIZE, on_resize)
        if on_blur is not None:
            bus.unsubscribe(pygame.WINDOWFOCUSLOST, on_blur)
        pygame.quit()


if __name__ == "__main__":
    asyncio.run(main())
