# src/tombcrawl/mapgen/placement.py
from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Tuple

from ..entity import Entity, make_orc, make_troll
from ..rect import Rect
from ..rng import DungeonRandom

logger = logging.getLogger(__name__)

# (weight, factory); weights sum to 1.0 and are checked in order.
MONSTER_TABLE: Sequence[Tuple[float, Callable[[int, int], Entity]]] = (
    (0.8, make_orc),
    (0.2, make_troll),
)


def _pick_factory(roll: float, table=MONSTER_TABLE) -> Callable[[int, int], Entity]:
    acc = 0.0
    for weight, factory in table:
        acc += weight
        if roll < acc:
            return factory
    return table[-1][1]


def place_objects(
    room: Rect,
    entities: List[Entity],
    rng: DungeonRandom,
    max_per_room: int,
) -> List[Entity]:
    """
    Spawn 0..max_per_room monsters inside `room` and append them to `entities`.

    Per monster the draws are: x in [x1+1, x2), y in [y1, y2), then the kind
    roll. The y range is not inset like x, so a monster can land on the room's
    top wall row. Existing occupants are not checked; stacking is allowed.
    Returns the newly spawned entities.
    """
    count = rng.randint(0, max_per_room)
    spawned: List[Entity] = []
    for _ in range(count):
        x = rng.randrange(room.x1 + 1, room.x2)
        y = rng.randrange(room.y1, room.y2)
        monster = _pick_factory(rng.random())(x, y)
        entities.append(monster)
        spawned.append(monster)
    if spawned:
        logger.debug("room %s: spawned %s", room, [m.name for m in spawned])
    return spawned
