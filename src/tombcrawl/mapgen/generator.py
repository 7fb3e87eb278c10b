# src/tombcrawl/mapgen/generator.py
# Rooms-and-corridors level generator: fixed attempt budget, rejection of
# overlapping candidates, one dogleg corridor from each room to the previous.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..config import DEFAULT_CONFIG, DungeonConfig
from ..entity import PLAYER_INDEX, Entity
from ..grid import Grid
from ..rect import Rect
from ..rng import DungeonRandom
from .carve import connect_centers, create_room
from .placement import place_objects

logger = logging.getLogger(__name__)


@dataclass
class Level:
    grid: Grid
    rooms: List[Rect] = field(default_factory=list)

    @property
    def room_count(self) -> int:
        return len(self.rooms)


def generate_level(
    entities: List[Entity],
    rng: DungeonRandom,
    config: DungeonConfig = DEFAULT_CONFIG,
) -> Level:
    """
    Build a fresh level. `entities[PLAYER_INDEX]` is the viewer; it is moved to
    the first accepted room's center, or left where it is if no room fits.
    Monsters are appended to `entities` as rooms are accepted.
    """
    config.validate()
    width, height = config.map_width, config.map_height
    grid = Grid.filled_with_walls(width, height)
    rooms: List[Rect] = []
    viewer = entities[PLAYER_INDEX]
    spawned = 0

    for _ in range(config.max_rooms):
        w = rng.randint(config.room_min_size, config.room_max_size)
        h = rng.randint(config.room_min_size, config.room_max_size)
        x = rng.randrange(0, width - w)
        y = rng.randrange(0, height - h)
        new_room = Rect.new(x, y, w, h)

        if any(new_room.intersects_with(other) for other in rooms):
            continue

        create_room(grid, new_room)
        spawned += len(place_objects(new_room, entities, rng, config.max_room_monsters))
        new_center = new_room.center()

        if not rooms:
            viewer.x, viewer.y = new_center
        else:
            prev_center = rooms[-1].center()
            connect_centers(grid, prev_center, new_center, horizontal_first=rng.coin())

        rooms.append(new_room)
        logger.debug("accepted room #%d %s center=%s", len(rooms), new_room, new_center)

    if not rooms:
        logger.warning("no rooms accepted in %d attempts; viewer left at %s", config.max_rooms, viewer.pos)
    logger.info(
        "generated %dx%d level: %d/%d rooms accepted, %d monsters",
        width, height, len(rooms), config.max_rooms, spawned,
    )
    return Level(grid=grid, rooms=rooms)
