from __future__ import annotations

"""Pygame window host for the Pong core.

Run with: `python -m gui.app`.

Controls:
  - W/S: left paddle
  - Up/Down: right paddle
  - Left/Right: counter
  - Q/Esc: quit
"""

import argparse
import logging
import sys
from typing import Optional

try:
    import pygame
except Exception as e:  # pragma: no cover - runtime dependency hint
    print("Pygame is required for GUI. Install via: pip install pygame", file=sys.stderr)
    raise

from pong.controls import KeyEvent, KeyKind
from pong.driver import App
from pong.engine import GameConfig

from . import constants as C
from .grid import CellGrid


logger = logging.getLogger(__name__)

NAMED_KEYS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    # Esc quits like Q in the window
    pygame.K_ESCAPE: "q",
}


def translate_event(event) -> Optional[KeyEvent]:
    """Map a pygame event to a key event, or None for anything else.

    Closing the window is reported as a Q press.
    """
    if event.type == pygame.QUIT:
        return KeyEvent("q", KeyKind.PRESS)
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    kind = KeyKind.PRESS if event.type == pygame.KEYDOWN else KeyKind.RELEASE
    if event.key in NAMED_KEYS:
        return KeyEvent(NAMED_KEYS[event.key], kind)
    if 32 <= event.key < 127:
        return KeyEvent(chr(event.key).lower(), kind)
    return None


class PygameEvents:
    def __init__(self, grid: CellGrid, flags: int):
        self.grid = grid
        self.flags = flags

    def poll(self, timeout_s: float) -> Optional[KeyEvent]:
        # Wait for at most one event; NOEVENT means the window timed out
        event = pygame.event.wait(max(1, int(timeout_s * 1000)))
        if event.type == pygame.VIDEORESIZE:
            self.grid.resize(pygame.display.set_mode((event.w, event.h), self.flags))
            return None
        return translate_event(event)


def parse_args(argv=None):
    """Parse command line flags for the window host."""
    p = argparse.ArgumentParser(description="Pong (pygame window)")
    p.add_argument("--cols", type=int, default=C.DEFAULT_GRID[0], help="Grid width in cells")
    p.add_argument("--rows", type=int, default=C.DEFAULT_GRID[1], help="Grid height in cells")
    p.add_argument("--font-size", type=int, default=C.FONT_SIZE)
    p.add_argument("--timeout-ms", type=int, default=82, help="Input wait per tick in ms (default 82)")
    p.add_argument("--single-player", action="store_true", help="Leave the right paddle unwired")
    p.add_argument("--log-file", default=None, help="Write logs to this file")
    return p.parse_args(argv)


def run(argv=None) -> int:
    """Run the pong loop in a pygame window.

    The window is closed even if drawing or polling fails.
    """
    args = parse_args(argv)
    if args.log_file is not None:
        logging.basicConfig(filename=args.log_file, level=logging.INFO)

    cols = max(C.MIN_GRID[0], args.cols)
    rows = max(C.MIN_GRID[1], args.rows)
    try:
        cfg = GameConfig(poll_timeout_ms=args.timeout_ms, wire_player_two=not args.single_player)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    pygame.init()
    try:
        pygame.display.set_caption("Pong")
        flags = pygame.RESIZABLE
        # A throwaway surface lets the grid measure its font before sizing the window
        grid = CellGrid(pygame.display.set_mode((1, 1)), args.font_size)
        grid.resize(pygame.display.set_mode(grid.window_px_for((cols, rows)), flags))
        pygame.key.set_repeat(*C.KEY_REPEAT)
        logger.info("window opened at %dx%d cells", cols, rows)
        App(config=cfg).run(grid, PygameEvents(grid, flags))
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run())
