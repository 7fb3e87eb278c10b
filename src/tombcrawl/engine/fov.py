# src/tombcrawl/engine/fov.py
# Field-of-view oracle boundary. The tracker only talks to VisibilityOracle;
# TcodOracle is the stock implementation backed by libtcod's FOV sweeps.

from __future__ import annotations

from typing import Optional, Protocol, Sequence

import numpy as np
import tcod.map


class VisibilityOracle(Protocol):
    def init(self, transparent: Sequence[Sequence[bool]], walkable: Sequence[Sequence[bool]]) -> None: ...

    def compute(self, x: int, y: int, radius: int, light_walls: bool, algorithm: int) -> None: ...

    def is_visible(self, x: int, y: int) -> bool: ...


class TcodOracle:
    """VisibilityOracle over tcod.map.compute_fov.

    Matrices are row-major ([y][x]); numpy arrays keep that shape, so the
    point of view handed to tcod is (y, x).
    """

    def __init__(self) -> None:
        self.transparent: Optional[np.ndarray] = None
        self.walkable: Optional[np.ndarray] = None
        self._fov: Optional[np.ndarray] = None

    def init(self, transparent, walkable) -> None:
        self.transparent = np.array(transparent, dtype=bool)
        self.walkable = np.array(walkable, dtype=bool)
        if self.transparent.shape != self.walkable.shape:
            raise ValueError(
                f"transparency {self.transparent.shape} and walkability {self.walkable.shape} differ"
            )
        self._fov = None

    def compute(self, x: int, y: int, radius: int, light_walls: bool, algorithm: int) -> None:
        if self.transparent is None:
            raise RuntimeError("TcodOracle.compute() called before init()")
        h, w = self.transparent.shape
        if not (0 <= x < w and 0 <= y < h):
            # An off-grid origin sees nothing.
            self._fov = np.zeros((h, w), dtype=bool)
            return
        self._fov = tcod.map.compute_fov(
            self.transparent,
            (y, x),
            radius=radius,
            light_walls=light_walls,
            algorithm=algorithm,
        )

    def is_visible(self, x: int, y: int) -> bool:
        # Nothing is visible until the first sweep.
        if self._fov is None:
            return False
        h, w = self._fov.shape
        if not (0 <= x < w and 0 <= y < h):
            return False
        return bool(self._fov[y, x])

