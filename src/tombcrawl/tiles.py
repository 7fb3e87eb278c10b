# Tile record, palette, and the renderer-facing color lookup.

from dataclasses import dataclass
from typing import Optional, Tuple

RGB = Tuple[int, int, int]

COLOR_DARK_WALL: RGB = (0, 0, 100)
COLOR_LIGHT_WALL: RGB = (130, 110, 50)
COLOR_DARK_GROUND: RGB = (50, 50, 150)
COLOR_LIGHT_GROUND: RGB = (200, 180, 50)


@dataclass
class Tile:
    blocked: bool
    block_sight: bool
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)

    @classmethod
    def floor(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)

    @property
    def transparent(self) -> bool:
        return not self.block_sight

    @property
    def walkable(self) -> bool:
        return not self.blocked


def tile_color(visible: bool, block_sight: bool, explored: bool) -> Optional[RGB]:
    """Background color for a tile, or None when it has never been seen."""
    if visible:
        return COLOR_LIGHT_WALL if block_sight else COLOR_LIGHT_GROUND
    if explored:
        return COLOR_DARK_WALL if block_sight else COLOR_DARK_GROUND
    return None
