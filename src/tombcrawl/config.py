from dataclasses import dataclass, replace

import tcod.constants

from .exceptions import ConfigError

# Window (driver only)
SCREEN_WIDTH, SCREEN_HEIGHT = 80, 50
LIMIT_FPS = 20


@dataclass(frozen=True)
class DungeonConfig:
    # Map size
    map_width: int = 80
    map_height: int = 45

    # Room generator
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30          # attempt budget, not a target count
    max_room_monsters: int = 3

    # Field of view
    fov_algorithm: int = tcod.constants.FOV_BASIC
    fov_light_walls: bool = True
    torch_radius: int = 10

    def validate(self) -> "DungeonConfig":
        if self.map_width <= 0 or self.map_height <= 0:
            raise ConfigError(f"map size must be positive, got {self.map_width}x{self.map_height}")
        if self.room_min_size <= 0:
            raise ConfigError(f"room_min_size must be positive, got {self.room_min_size}")
        if self.room_min_size > self.room_max_size:
            raise ConfigError(f"room_min_size {self.room_min_size} > room_max_size {self.room_max_size}")
        # x is drawn from [0, W-w): the largest room must leave at least one column/row.
        if self.room_max_size >= self.map_width or self.room_max_size >= self.map_height:
            raise ConfigError(
                f"room_max_size {self.room_max_size} does not fit a {self.map_width}x{self.map_height} map"
            )
        if self.max_rooms < 0:
            raise ConfigError(f"max_rooms must be >= 0, got {self.max_rooms}")
        if self.max_room_monsters < 0:
            raise ConfigError(f"max_room_monsters must be >= 0, got {self.max_room_monsters}")
        if self.torch_radius <= 0:
            raise ConfigError(f"torch_radius must be positive, got {self.torch_radius}")
        return self

    def with_overrides(self, **changes) -> "DungeonConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = DungeonConfig()
