import pytest
import tcod.constants

from tombcrawl.config import DEFAULT_CONFIG
from tombcrawl.engine.fov import TcodOracle
from tombcrawl.engine.visibility import TileVisibility, VisibilityTracker
from tombcrawl.grid import Grid


class RecordingOracle:
    """Sees every tile within Chebyshev distance 1 of the last origin."""

    def __init__(self):
        self.inits = []
        self.computes = []

    def init(self, transparent, walkable):
        self.inits.append((transparent, walkable))

    def compute(self, x, y, radius, light_walls, algorithm):
        self.computes.append((x, y, radius, light_walls, algorithm))

    def is_visible(self, x, y):
        if not self.computes:
            return False
        ox, oy = self.computes[-1][:2]
        return max(abs(x - ox), abs(y - oy)) <= 1


def open_grid(w=8, h=8):
    g = Grid.filled_with_walls(w, h)
    for x, y in g.coords():
        g.carve(x, y)
    return g


def test_init_passes_grid_matrices():
    g = open_grid(3, 2)
    oracle = RecordingOracle()
    VisibilityTracker(g, oracle)
    assert oracle.inits == [(g.transparency(), g.walkability())]


def test_first_tick_always_computes_then_skips_until_moved():
    oracle = RecordingOracle()
    tracker = VisibilityTracker(open_grid(), oracle)
    assert tracker.update(0, 0) is True
    assert tracker.update(0, 0) is False
    assert tracker.update(0, 0) is False
    assert len(oracle.computes) == 1
    assert tracker.update(1, 0) is True
    assert len(oracle.computes) == 2
    assert tracker.recomputes == 2


def test_compute_receives_configured_parameters():
    cfg = DEFAULT_CONFIG.with_overrides(torch_radius=4, fov_light_walls=False)
    oracle = RecordingOracle()
    VisibilityTracker(open_grid(), oracle, cfg).update(2, 3)
    assert oracle.computes == [(2, 3, 4, False, cfg.fov_algorithm)]


def test_three_states_and_monotonic_memory():
    g = open_grid()
    tracker = VisibilityTracker(g, RecordingOracle())
    assert tracker.state(1, 1) is TileVisibility.UNKNOWN

    tracker.update(1, 1)
    assert tracker.state(1, 1) is TileVisibility.VISIBLE
    assert tracker.state(0, 0) is TileVisibility.VISIBLE
    assert tracker.state(5, 5) is TileVisibility.UNKNOWN

    tracker.update(5, 5)
    assert tracker.state(0, 0) is TileVisibility.REMEMBERED
    assert tracker.state(5, 5) is TileVisibility.VISIBLE
    assert tracker.state(7, 0) is TileVisibility.UNKNOWN

    seen = {(x, y) for x, y in g.coords() if g.tile(x, y).explored}
    for pos in [(6, 6), (2, 2), (7, 7), (0, 7)]:
        tracker.update(*pos)
        now = {(x, y) for x, y in g.coords() if g.tile(x, y).explored}
        assert seen <= now
        seen = now


def test_out_of_bounds_state_is_unknown():
    tracker = VisibilityTracker(open_grid(), RecordingOracle())
    tracker.update(0, 0)
    assert tracker.state(-1, 0) is TileVisibility.UNKNOWN
    assert tracker.is_visible(-1, -1) is False


def test_tcod_oracle_nothing_visible_before_compute():
    oracle = TcodOracle()
    oracle.init([[True, True], [True, True]], [[True, True], [True, True]])
    assert oracle.is_visible(0, 0) is False


def test_tcod_oracle_requires_init_and_matching_shapes():
    with pytest.raises(RuntimeError):
        TcodOracle().compute(0, 0, 5, True, tcod.constants.FOV_BASIC)
    with pytest.raises(ValueError):
        TcodOracle().init([[True, True]], [[True]])


def test_tcod_oracle_wall_blocks_sight():
    # 7x5 room with a full-height wall at x=3
    g = open_grid(7, 5)
    for y in range(5):
        t = g.tile(3, y)
        t.blocked = True
        t.block_sight = True
    oracle = TcodOracle()
    tracker = VisibilityTracker(g, oracle)
    tracker.update(1, 2)

    assert oracle.is_visible(1, 2)
    assert oracle.is_visible(3, 2)          # lit wall face
    assert not oracle.is_visible(5, 2)      # behind the wall
    assert not oracle.is_visible(10, 2)     # off-grid
    assert tracker.state(3, 2) is TileVisibility.VISIBLE
    assert tracker.state(5, 2) is TileVisibility.UNKNOWN


def test_tcod_oracle_off_grid_origin_sees_nothing():
    oracle = TcodOracle()
    oracle.init([[True] * 4] * 3, [[True] * 4] * 3)
    oracle.compute(200, 1, 10, True, tcod.constants.FOV_BASIC)
    assert not any(oracle.is_visible(x, y) for x in range(4) for y in range(3))
    oracle.compute(1, 1, 10, True, tcod.constants.FOV_BASIC)
    assert oracle.is_visible(1, 1)
