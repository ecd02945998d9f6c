from __future__ import annotations

"""Map normalized positions to character cells.

The ball is drawn with one of nine two-row glyphs. The glyph is picked from
the fractional part of the denormalized position, which lets the ball look
like it moves in thirds of a cell on a coarse grid.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import math

from . import constants as C


class Zone(Enum):
    LOW = 0
    MID = 1
    HIGH = 2


# Column shift for each horizontal zone
H_OFFSET = {Zone.LOW: -1, Zone.MID: 0, Zone.HIGH: 1}

LOW_EDGE = 0.33
HIGH_EDGE = 0.66


@dataclass(frozen=True)
class Placement:
    col: int
    row: int
    text: str


def denormalize(value: float, cells: int) -> float:
    """Scale a normalized coordinate to cell units."""
    return value * cells


def fractional(value: float) -> float:
    """Return the part of a cell coordinate past its cell boundary."""
    return value - math.floor(value)


def zone_bucket(frac: float) -> Zone:
    """Return the zone for a fractional cell offset.

    Both edges belong to the outer zones: 0.33 is LOW and 0.66 is HIGH.
    """
    if LOW_EDGE < frac < HIGH_EDGE:
        return Zone.MID
    if frac >= HIGH_EDGE:
        return Zone.HIGH
    return Zone.LOW


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def ball_glyph(h_zone: Zone, v_zone: Zone) -> Tuple[str, str]:
    return C.BALL_GLYPHS[v_zone.value][h_zone.value]


def place_ball(ball: Tuple[float, float], width: int, height: int) -> List[Placement]:
    """Return the top and bottom glyph placements for the ball.

    Positions are relative to a region of width by height cells whose outer
    ring is a border. Rows never land on the border.
    """
    dx = denormalize(ball[0], width)
    dy = denormalize(ball[1], height)
    h_zone = zone_bucket(fractional(dx))
    v_zone = zone_bucket(fractional(dy))
    top, bottom = ball_glyph(h_zone, v_zone)

    # The vertical zone picks the glyph row, then caps at one for the offset
    v_off = min(v_zone.value, 1)
    base_col = int(dx) + (H_OFFSET[h_zone] - 1) - C.BALL_COLUMN_SHIFT
    base_row = int(dy)

    placements = []
    for text, row in ((top, base_row + v_off - 1), (bottom, base_row + v_off)):
        col = clamp(base_col, 1, max(1, width - 1 - len(text)))
        placements.append(Placement(col, clamp(row, 1, height - 2), text))
    return placements


def place_paddle(y: float, side: str, width: int, height: int) -> List[Placement]:
    """Return the three stacked placements for a paddle centered on y."""
    if side == "left":
        col = C.PADDLE_MARGIN
        glyphs = C.LEFT_PADDLE_GLYPHS
    else:
        col = width - 1 - C.PADDLE_MARGIN
        glyphs = C.RIGHT_PADDLE_GLYPHS
    center = int(denormalize(y, height))
    return [
        Placement(col, clamp(center + i - 1, 1, height - 2), glyph)
        for i, glyph in enumerate(glyphs)
    ]
