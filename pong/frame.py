from __future__ import annotations

"""Frame building: turn game state into draw calls for a cell surface.

A frame is a flat list of text draws in absolute cell coordinates. Later
calls overwrite earlier ones, so boxes are emitted before their contents.
Hosts only need to know how to put a string at a cell in a named color.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from . import constants as C
from .mapper import Placement, place_ball, place_paddle


@dataclass(frozen=True)
class DrawCall:
    x: int
    y: int
    text: str
    color: str = C.WHITE
    bold: bool = False


@dataclass
class Frame:
    width: int
    height: int
    calls: List[DrawCall] = field(default_factory=list)

    def extend(self, calls: List[DrawCall]) -> None:
        self.calls.extend(calls)

    def text_at(self, x: int, y: int) -> Optional[str]:
        """Return the text of the last draw call starting at a cell, if any."""
        found = None
        for call in self.calls:
            if call.x == x and call.y == y:
                found = call.text
        return found


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


def split_layout(width: int, height: int) -> Tuple[Rect, Optional[Rect]]:
    """Split the screen into the game region and an optional stats panel.

    The game region is capped in both directions and anchored top-left. The
    stats panel takes the remaining columns when there are enough of them.
    """
    game_w = min(C.GAME_MAX_WIDTH, width)
    if width - game_w < C.STATS_MIN_WIDTH:
        game_w = max(0, width - C.STATS_MIN_WIDTH)
    game_h = min(C.GAME_MAX_HEIGHT, height)
    game = Rect(0, 0, game_w, game_h)
    stats_w = width - game_w
    if game_w == 0 or stats_w < C.STATS_MIN_WIDTH:
        return Rect(0, 0, width, game_h), None
    return game, Rect(game_w, 0, stats_w, height)


def centered_x(rect: Rect, text: str) -> int:
    return rect.x + max(0, (rect.width - len(text)) // 2)


def draw_box(rect: Rect, title: str = "", footer: Tuple[Tuple[str, str], ...] = ()) -> List[DrawCall]:
    """Return draw calls for a thick bordered box with optional titles.

    The footer is a sequence of (text, color) pieces centered on the bottom edge.
    """
    if rect.width < 2 or rect.height < 2:
        return []
    inner = rect.width - 2
    calls = [
        DrawCall(rect.x, rect.y, C.BORDER_TL + C.BORDER_H * inner + C.BORDER_TR),
        DrawCall(rect.x, rect.y + rect.height - 1, C.BORDER_BL + C.BORDER_H * inner + C.BORDER_BR),
    ]
    for row in range(rect.y + 1, rect.y + rect.height - 1):
        calls.append(DrawCall(rect.x, row, C.BORDER_V))
        calls.append(DrawCall(rect.x + rect.width - 1, row, C.BORDER_V))
    if title and len(title) <= inner:
        calls.append(DrawCall(centered_x(rect, title), rect.y, title, bold=True))
    footer_len = sum(len(text) for text, _ in footer)
    if footer and footer_len <= inner:
        x = rect.x + max(0, (rect.width - footer_len) // 2)
        for text, color in footer:
            calls.append(DrawCall(x, rect.y + rect.height - 1, text, color, bold=color != C.WHITE))
            x += len(text)
    return calls


def _offset(rect: Rect, placements: List[Placement], color: str) -> List[DrawCall]:
    # An empty half means nothing is drawn on that row
    return [DrawCall(rect.x + p.col, rect.y + p.row, p.text, color) for p in placements if p.text]


def render_game(game, rect: Rect) -> List[DrawCall]:
    """Return draw calls for the bordered field, the ball and both paddles."""
    title = "({}) - ({})".format(*game.score)
    calls = draw_box(rect, title, footer=((" Quit ", C.WHITE), ("<Q> ", C.BLUE)))
    if rect.width < 4 or rect.height < 3:
        return calls
    calls += _offset(rect, place_ball(game.ball, rect.width, rect.height), C.YELLOW)
    calls += _offset(rect, place_paddle(game.p1_pos[1], "left", rect.width, rect.height), C.YELLOW)
    calls += _offset(rect, place_paddle(game.p2_pos[1], "right", rect.width, rect.height), C.YELLOW)
    return calls


def render_stats(app, rect: Rect) -> List[DrawCall]:
    """Return draw calls for the stats panel."""
    calls = draw_box(rect, " Stats : ")
    rows = [
        ("Ball_x: ", "{:.3f}".format(app.game.ball[0])),
        ("Ticks: ", str(app.ticks)),
        ("Counter: ", str(app.counter)),
    ]
    for i, (label, value) in enumerate(rows):
        y = rect.y + 1 + i
        if y >= rect.y + rect.height - 1:
            break
        x = centered_x(rect, label + value)
        calls.append(DrawCall(x, y, label))
        calls.append(DrawCall(x + len(label), y, value, C.YELLOW))
    return calls


def render_menu(app, rect: Rect) -> List[DrawCall]:
    return []


def render_game_over(app, rect: Rect) -> List[DrawCall]:
    return []


def render_game_mode(app, rect: Rect) -> List[DrawCall]:
    return render_game(app.game, rect)
