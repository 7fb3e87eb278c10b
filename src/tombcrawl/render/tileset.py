# src/tombcrawl/render/tileset.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional

import pygame

from ..tiles import RGB
from .frame import Cell


class GlyphSet:
    """
    Cached pygame surfaces for map cells:
      - one square per (glyph, fg, bg) combination
      - background fill only when the cell has been seen
    """

    def __init__(self, cell_size: int, font: Optional[pygame.font.Font] = None):
        self.cell_size = cell_size
        self.font = font or pygame.font.SysFont("monospace", max(8, cell_size), bold=True)

    @lru_cache(maxsize=1024)
    def surface(self, glyph: str, fg: RGB, bg: Optional[RGB]) -> pygame.Surface:
        img = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        if bg is not None:
            img.fill(bg)
        if glyph.strip():
            txt = self.font.render(glyph, True, fg)
            img.blit(txt, txt.get_rect(center=(self.cell_size // 2, self.cell_size // 2)))
        return img

    def view(self, cell: Cell) -> pygame.Surface:
        return self.surface(cell.glyph, cell.fg, cell.bg)
