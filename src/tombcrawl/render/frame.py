# src/tombcrawl/render/frame.py
# Renderer-neutral frame: what each map cell should look like right now.
# Drawing backends (pygame window, Pillow snapshots) only consume Cells.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..engine.state import GameState
from ..entity import PLAYER_INDEX
from ..tiles import RGB

BLACK: RGB = (0, 0, 0)


@dataclass(frozen=True)
class Cell:
    glyph: str = " "
    fg: RGB = (255, 255, 255)
    bg: Optional[RGB] = None   # None: never seen, leave the background


def build_frame(state: GameState) -> List[List[Cell]]:
    """Return frame[y][x] for the whole map."""
    grid = state.grid
    frame = [
        [Cell(bg=state.tile_color(x, y)) for x in range(grid.width)]
        for y in range(grid.height)
    ]
    # Monsters only show while in view; the viewer is drawn last, on top.
    order = [e for i, e in enumerate(state.entities) if i != PLAYER_INDEX] + [state.player]
    for e in order:
        if not grid.in_bounds(e.x, e.y):
            continue
        if e is not state.player and not state.visibility.is_visible(e.x, e.y):
            continue
        under = frame[e.y][e.x]
        frame[e.y][e.x] = Cell(glyph=e.glyph, fg=e.color, bg=under.bg)
    return frame
