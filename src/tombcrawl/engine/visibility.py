# src/tombcrawl/engine/visibility.py
# Per-tile exploration memory kept in step with the FOV oracle.
#
# Two stored bits (grid explored flag + the oracle's last sweep) give three
# states: UNKNOWN, REMEMBERED, VISIBLE. The oracle is only re-run when the
# viewer's position differs from the one seen on the previous update.

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

from ..config import DEFAULT_CONFIG, DungeonConfig
from ..grid import Grid
from .fov import VisibilityOracle

logger = logging.getLogger(__name__)

XY = Tuple[int, int]


class TileVisibility(Enum):
    UNKNOWN = 0
    REMEMBERED = 1
    VISIBLE = 2


class VisibilityTracker:
    def __init__(self, grid: Grid, oracle: VisibilityOracle, config: DungeonConfig = DEFAULT_CONFIG) -> None:
        self.grid = grid
        self.oracle = oracle
        self.radius = config.torch_radius
        self.light_walls = config.fov_light_walls
        self.algorithm = config.fov_algorithm
        # None never equals a real position, so the first update always sweeps.
        self.previous: Optional[XY] = None
        self.recomputes = 0
        oracle.init(grid.transparency(), grid.walkability())

    def update(self, x: int, y: int) -> bool:
        """Run once per tick with the viewer position. Returns True if the
        oracle was recomputed."""
        if self.previous == (x, y):
            return False
        self.previous = (x, y)
        self.oracle.compute(x, y, self.radius, self.light_walls, self.algorithm)
        self.recomputes += 1

        newly = 0
        for cx, cy in self.grid.coords():
            if self.oracle.is_visible(cx, cy):
                if not self.grid.rows[cy][cx].explored:
                    newly += 1
                self.grid.explore(cx, cy)
        logger.debug("fov recompute #%d at (%d, %d): %d tiles newly explored", self.recomputes, x, y, newly)
        return True

    def is_visible(self, x: int, y: int) -> bool:
        return self.grid.in_bounds(x, y) and self.oracle.is_visible(x, y)

    def state(self, x: int, y: int) -> TileVisibility:
        if self.is_visible(x, y):
            return TileVisibility.VISIBLE
        if self.grid.in_bounds(x, y) and self.grid.rows[y][x].explored:
            return TileVisibility.REMEMBERED
        return TileVisibility.UNKNOWN
