# tools/run_game.py
# Interactive Lights Out: pygame window, 640x360 pixel framebuffer scaled to the window.
# Keys: R replay seed, N new board, S toggle 9x9/5x5, F11 fullscreen, ESC quit.
# Left mouse release presses a light.

from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import Optional, Tuple

import pygame

# Project imports
try:
    from lightsout.config import DEFAULTS
    from lightsout.engine.commands import Command, click_at, dispatch
    from lightsout.engine.state import GameSession
    from lightsout.render.board_view import BoardLayout, draw_board
    from lightsout.ui.status_bar import render_hud
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

log = logging.getLogger("run_game")

KEY_COMMANDS = {
    pygame.K_r: Command.REPLAY,
    pygame.K_n: Command.NEW_BOARD,
    pygame.K_s: Command.TOGGLE_SIZE,
}


def window_to_framebuffer(pos: Tuple[int, int], window_size: Tuple[int, int], fb_size: Tuple[int, int]) -> Tuple[int, int]:
    wx, wy = pos
    ww, wh = window_size
    fw, fh = fb_size
    return (wx * fw // max(1, ww), wy * fh // max(1, wh))


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Turn the Lights Out")
    parser.add_argument("--size", type=int, default=DEFAULTS.board_size, help="board side length")
    parser.add_argument("--alt-size", type=int, default=DEFAULTS.alt_board_size, help="size the S key switches to")
    parser.add_argument("--strength", type=int, default=DEFAULTS.generation_strength, help="simulated clicks per generated board")
    parser.add_argument("--seed", type=int, default=None, help="start on a fixed seed instead of a random one")
    parser.add_argument("--scale", type=int, default=2, help="window pixels per framebuffer pixel")
    parser.add_argument("--fps", type=int, default=DEFAULTS.fps)
    parser.add_argument("--log-file", type=str, default=None, help="also write the log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log board generation at DEBUG")
    args = parser.parse_args(argv)

    if args.size < 1 or args.alt_size < 1:
        parser.error("board sizes must be >= 1")

    handlers = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    config = dataclasses.replace(
        DEFAULTS,
        board_size=args.size,
        alt_board_size=args.alt_size,
        generation_strength=args.strength,
        fps=args.fps,
    )

    # Pygame window + framebuffer
    try:
        pygame.init()
        fb_w, fb_h = config.framebuffer_size
        screen = pygame.display.set_mode((fb_w * args.scale, fb_h * args.scale), pygame.RESIZABLE)
        pygame.display.set_caption(config.window_title)
        framebuffer = pygame.Surface(config.framebuffer_size)
    except pygame.error:
        logging.exception("Display init failed!")
        pygame.quit()
        return 1

    session = GameSession(config=config, seed=args.seed)
    log.info("started %dx%d board, seed=%d", session.size, session.size, session.seed)
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            ms = clock.tick(config.fps)
            session.tick(ms / 1000.0)

            # --- Input ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYUP:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_F11:
                        pygame.display.toggle_fullscreen()
                    elif event.key in KEY_COMMANDS:
                        dispatch(session, KEY_COMMANDS[event.key])
                        log.info("%s -> seed=%d attempts=%d", KEY_COMMANDS[event.key].value, session.seed, session.attempts)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    screen = pygame.display.get_surface()
                    px = window_to_framebuffer(event.pos, screen.get_size(), config.framebuffer_size)
                    click_at(session, px, BoardLayout.for_size(session.size, config))

            # --- Rendering ---
            framebuffer.fill(config.background)
            draw_board(framebuffer, session, config)
            render_hud(framebuffer, session, fps=round(clock.get_fps()), config=config)

            screen = pygame.display.get_surface()
            pygame.transform.scale(framebuffer, screen.get_size(), screen)
            pygame.display.flip()
    except Exception:
        logging.exception("Error during loop:")
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
