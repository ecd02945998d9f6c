from __future__ import annotations

"""Character cell surface drawn into a pygame window.

The grid measures one monospace cell and lays text out on whole cells, so a
frame built for a terminal looks the same in a window.
"""

from typing import Dict, Tuple

import pygame

from pong.frame import Frame

from . import constants as C


class CellGrid:
    def __init__(self, screen: pygame.Surface, font_size: int = C.FONT_SIZE):
        # This loads the font and measures one cell
        self.screen = screen
        self.font = pygame.font.SysFont(C.FONT_NAME, font_size)
        self.font_bold = pygame.font.SysFont(C.FONT_NAME, font_size, bold=True)
        w, h = self.font.size("█")
        self.cell_px: Tuple[int, int] = (max(1, w), max(1, h))
        self._glyphs: Dict[Tuple[str, str, bool], pygame.Surface] = {}

    def resize(self, screen: pygame.Surface):
        # This picks up a new window surface after a resize
        self.screen = screen

    def size(self) -> Tuple[int, int]:
        """Return the grid size in cells for the current window."""
        w_px, h_px = self.screen.get_size()
        cw, ch = self.cell_px
        return w_px // cw, h_px // ch

    def window_px_for(self, cells: Tuple[int, int]) -> Tuple[int, int]:
        """Return the window size in pixels that fits a grid of cells."""
        cw, ch = self.cell_px
        return cells[0] * cw, cells[1] * ch

    def _glyph(self, ch: str, color: str, bold: bool) -> pygame.Surface:
        key = (ch, color, bold)
        surf = self._glyphs.get(key)
        if surf is None:
            font = self.font_bold if bold else self.font
            surf = font.render(ch, True, C.PALETTE.get(color, C.FALLBACK_COLOR))
            self._glyphs[key] = surf
        return surf

    def draw(self, frame: Frame) -> None:
        """Clear the window, draw every call cell by cell and flip."""
        cw, ch = self.cell_px
        cols, rows = self.size()
        self.screen.fill(C.BACKGROUND)
        for call in frame.calls:
            if not 0 <= call.y < rows:
                continue
            for i, glyph in enumerate(call.text):
                col = call.x + i
                if not 0 <= col < cols:
                    continue
                # Blank the cell so later calls overwrite earlier ones
                rect = pygame.Rect(col * cw, call.y * ch, cw, ch)
                self.screen.fill(C.BACKGROUND, rect)
                if glyph != " ":
                    self.screen.blit(self._glyph(glyph, call.color, call.bold), rect.topleft)
        pygame.display.flip()
