# src/tombcrawl/engine/state.py
# GameState: owns one level (grid, entities, visibility memory) and is the
# only thing the loop driver talks to.

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, DungeonConfig
from ..exceptions import ConfigError
from ..entity import PLAYER_INDEX, Entity, blocking_entity_at, make_player
from ..grid import Grid
from ..mapgen.generator import generate_level
from ..rng import DungeonRandom
from ..tiles import RGB, tile_color
from .fov import TcodOracle, VisibilityOracle
from .visibility import TileVisibility, VisibilityTracker

logger = logging.getLogger(__name__)

XY = Tuple[int, int]


class GameState:
    def __init__(
        self,
        config: DungeonConfig = DEFAULT_CONFIG,
        *,
        seed: Optional[int] = None,
        rng: Optional[DungeonRandom] = None,
        oracle_factory: Callable[[], VisibilityOracle] = TcodOracle,
        player_start: XY = (0, 0),
    ) -> None:
        self.config = config.validate()
        sx, sy = player_start
        if not (0 <= sx < config.map_width and 0 <= sy < config.map_height):
            raise ConfigError(
                f"player_start {player_start} outside {config.map_width}x{config.map_height} map"
            )
        self.rng = rng if rng is not None else DungeonRandom(seed)
        self.oracle_factory = oracle_factory
        self.player_start = player_start

        # Filled by new_level()
        self.grid: Grid
        self.entities: List[Entity] = []
        self.visibility: VisibilityTracker
        self.room_count = 0
        self.level_index = 0
        self.new_level()

    # ---- Level lifecycle ----
    def new_level(self) -> None:
        """Throw away the current level and generate a new one in its place."""
        entities = [make_player(*self.player_start)]
        level = generate_level(entities, self.rng, self.config)
        self.grid = level.grid
        self.entities = entities
        self.room_count = level.room_count
        self.visibility = VisibilityTracker(self.grid, self.oracle_factory(), self.config)
        self.level_index += 1
        logger.info(
            "level %d ready: %d rooms, %d entities, player at %s",
            self.level_index, self.room_count, len(self.entities), self.player.pos,
        )

    # ---- Queries ----
    @property
    def player(self) -> Entity:
        return self.entities[PLAYER_INDEX]

    def blocking_entity_at(self, x: int, y: int) -> Optional[Entity]:
        return blocking_entity_at(self.entities, x, y)

    def tile_state(self, x: int, y: int) -> TileVisibility:
        return self.visibility.state(x, y)

    def tile_color(self, x: int, y: int) -> Optional[RGB]:
        t = self.grid.tile(x, y)
        return tile_color(self.visibility.is_visible(x, y), t.block_sight, t.explored)

    # ---- Driver hooks ----
    def move_player(self, dx: int, dy: int) -> bool:
        return self.player.move_by(dx, dy, self.grid, self.entities)

    def tick(self) -> bool:
        """Per-loop visibility refresh; True if the FOV was recomputed."""
        px, py = self.player.pos
        return self.visibility.update(px, py)
