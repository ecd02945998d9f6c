from __future__ import annotations

import argparse
import curses
import locale
import logging
import sys
from typing import List, Optional, Tuple

from . import constants as C
from .controls import InputState, KeyEvent, KeyKind
from .driver import App
from .engine import Game, GameConfig
from .frame import Frame


logger = logging.getLogger(__name__)

NAMED_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    # Esc quits like Q
    27: "q",
}


def translate_key(ch: int) -> Optional[KeyEvent]:
    """Map a curses key code to a key event.

    Curses reports presses only, so every event is a press.
    """
    if ch == -1:
        return None
    if ch in NAMED_KEYS:
        return KeyEvent(NAMED_KEYS[ch], KeyKind.PRESS)
    if 0 <= ch < 256 and chr(ch).isprintable():
        return KeyEvent(chr(ch).lower(), KeyKind.PRESS)
    return None


class CursesEvents:
    def __init__(self, stdscr):
        self.stdscr = stdscr

    def poll(self, timeout_s: float) -> Optional[KeyEvent]:
        # Bounded wait; getch returns -1 on timeout
        self.stdscr.timeout(max(1, int(timeout_s * 1000)))
        return translate_key(self.stdscr.getch())


class CursesSurface:
    COLORS = {C.WHITE: curses.COLOR_WHITE, C.YELLOW: curses.COLOR_YELLOW, C.BLUE: curses.COLOR_BLUE}

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.pairs = {}
        curses.curs_set(0)
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            for i, (name, color) in enumerate(self.COLORS.items(), start=1):
                curses.init_pair(i, color, -1)
                self.pairs[name] = curses.color_pair(i)

    def size(self) -> Tuple[int, int]:
        h, w = self.stdscr.getmaxyx()
        return w, h

    def draw(self, frame: Frame) -> None:
        w, h = self.size()
        self.stdscr.erase()
        for call in frame.calls:
            if not (0 <= call.y < h and 0 <= call.x < w):
                continue
            attr = self.pairs.get(call.color, 0)
            if call.bold:
                attr |= curses.A_BOLD
            try:
                self.stdscr.addstr(call.y, call.x, call.text[: w - call.x], attr)
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen
                pass
        self.stdscr.refresh()


def trace(cfg: GameConfig, ticks: int) -> List[str]:
    """Step a game without input and describe the ball after each tick."""
    game = Game.from_config(cfg)
    idle = InputState()
    lines = []
    for i in range(1, ticks + 1):
        game.update(idle)
        x, y = game.ball
        vx, vy = game.ball_v
        lines.append(f"tick {i}: ball=({x:.4f}, {y:.4f}) v=({vx:+.4f}, {vy:+.4f})")
    return lines


def build_config(args) -> GameConfig:
    return GameConfig(
        ball_velocity=(args.vx, args.vy),
        paddle_step=args.paddle_step,
        poll_timeout_ms=args.timeout_ms,
        wire_player_two=not args.single_player,
        clamp_down=not args.unclamped_down,
    )


def configure_logging(log_file: Optional[str], verbose: bool) -> None:
    # Curses owns the terminal, so logs only go to a file
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    """Run the terminal front-end.

    With --trace the game runs headless and prints the ball path instead.
    """
    parser = argparse.ArgumentParser(description="Terminal Pong (curses)")
    parser.add_argument("--timeout-ms", type=int, default=82, help="Input wait per tick in ms (default 82)")
    parser.add_argument("--paddle-step", type=float, default=0.22, help="Paddle move per tick (default 0.22)")
    parser.add_argument("--vx", type=float, default=0.055, help="Initial ball x velocity")
    parser.add_argument("--vy", type=float, default=0.0275, help="Initial ball y velocity")
    parser.add_argument("--single-player", action="store_true", help="Leave the right paddle unwired")
    parser.add_argument("--unclamped-down", action="store_true", help="Do not clamp downward paddle motion")
    parser.add_argument("--trace", type=int, default=None, metavar="TICKS", help="Print the ball path headless and exit")
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug level logging")

    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    try:
        cfg = build_config(args)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    if args.trace is not None:
        if args.trace < 0:
            print("Invalid input: trace ticks must be non-negative", file=sys.stderr)
            return 2
        for line in trace(cfg, args.trace):
            print(line)
        return 0

    locale.setlocale(locale.LC_ALL, "")
    app = App(config=cfg)
    logger.info("starting curses host")
    curses.wrapper(lambda stdscr: app.run(CursesSurface(stdscr), CursesEvents(stdscr)))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
