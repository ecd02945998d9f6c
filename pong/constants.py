from __future__ import annotations

"""Glyphs, colors and layout sizes shared by the frame builder and hosts.

Glyph choices are cosmetic. Any box-drawing set works as long as the ball
table keeps its three vertical by three horizontal zone layout.
"""

# Ball halves as (top row, bottom row), indexed [vertical zone][horizontal zone].
# An empty string leaves that row blank.
BALL_GLYPHS = (
    (("▗▄", "▝▀"), ("▗▄▖", "▝▀▘"), ("▄▖", "▀▘")),
    (("▐█▌", ""), ("██", ""), ("▐█▌", "")),
    (("▗▄", "▝▀"), ("▗▄▖", "▝▀▘"), ("▄▖", "▀▘")),
)

# Paddle caps and body per side: (top, body, bottom)
LEFT_PADDLE_GLYPHS = ("┓", "┃", "┛")
RIGHT_PADDLE_GLYPHS = ("┏", "┃", "┗")

# Thick border set: horizontal, vertical, corners (tl, tr, bl, br)
BORDER_H = "━"
BORDER_V = "┃"
BORDER_TL = "┏"
BORDER_TR = "┓"
BORDER_BL = "┗"
BORDER_BR = "┛"

# Named colors understood by every host
WHITE = "white"
YELLOW = "yellow"
BLUE = "blue"

# Layout: the game region is capped, the stats panel takes what is left
GAME_MAX_WIDTH = 100
GAME_MAX_HEIGHT = 30
STATS_MIN_WIDTH = 10

# Horizontal shift applied to the ball's top-left column
BALL_COLUMN_SHIFT = 2

# Columns between the field edge and a paddle
PADDLE_MARGIN = 1

COUNTER_MAX = 255
