# Entities: one record type for the viewer and monsters, told apart by kind.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .grid import Grid
from .tiles import RGB

XY = Tuple[int, int]

# The viewer always lives at this slot of the session's entity list.
PLAYER_INDEX = 0

WHITE: RGB = (255, 255, 255)
DESATURATED_GREEN: RGB = (63, 127, 63)
DARKER_GREEN: RGB = (0, 127, 0)


class EntityKind(Enum):
    PLAYER = "player"
    ORC = "orc"
    TROLL = "troll"


@dataclass
class Entity:
    x: int
    y: int
    glyph: str
    color: RGB
    name: str
    kind: EntityKind
    blocks_movement: bool = True
    alive: bool = True

    @property
    def pos(self) -> XY:
        return (self.x, self.y)

    def move_by(self, dx: int, dy: int, grid: Grid, others: Iterable[Entity] = ()) -> bool:
        """Step by (dx, dy) unless the target is off-grid, rock, or occupied.

        Returns True when the entity moved.
        """
        nx, ny = self.x + dx, self.y + dy
        if grid.is_blocked(nx, ny):
            return False
        if blocking_entity_at(others, nx, ny, ignore=self) is not None:
            return False
        self.x, self.y = nx, ny
        return True


def blocking_entity_at(
    entities: Iterable[Entity], x: int, y: int, ignore: Optional[Entity] = None
) -> Optional[Entity]:
    for e in entities:
        if e is ignore:
            continue
        if e.blocks_movement and e.alive and e.x == x and e.y == y:
            return e
    return None


def make_player(x: int = 0, y: int = 0) -> Entity:
    return Entity(x, y, "@", WHITE, "player", EntityKind.PLAYER)


def make_orc(x: int, y: int) -> Entity:
    return Entity(x, y, "o", DESATURATED_GREEN, "orc", EntityKind.ORC)


def make_troll(x: int, y: int) -> Entity:
    return Entity(x, y, "T", DARKER_GREEN, "troll", EntityKind.TROLL)
