from __future__ import annotations

"""Constants for the pygame window host.

The window shows the same character grid as the terminal host. Sizes are in
cells unless noted; pixel sizes follow from the font metrics at runtime.
"""

# Grid size in cells
DEFAULT_GRID = (120, 32)
MIN_GRID = (24, 8)

# Font
FONT_NAME = "dejavusansmono,menlo,consolas,couriernew,monospace"
FONT_SIZE = 18

# Colors (R,G,B) for the named colors used in frames
BACKGROUND = (10, 18, 24)
PALETTE = {
    "white": (240, 240, 240),
    "yellow": (242, 214, 0),
    "blue": (66, 135, 245),
}
FALLBACK_COLOR = (240, 240, 240)

# Key repeat so a held key is seen again on later polls (delay, interval in ms)
KEY_REPEAT = (120, 40)
