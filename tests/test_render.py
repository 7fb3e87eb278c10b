from PIL import Image

from tombcrawl.engine.state import GameState
from tombcrawl.entity import make_orc
from tombcrawl.render.frame import build_frame
from tombcrawl.render.snapshot import save_png
from tombcrawl.tiles import COLOR_LIGHT_GROUND


class NearOracle:
    def init(self, transparent, walkable):
        self.origin = None

    def compute(self, x, y, radius, light_walls, algorithm):
        self.origin = (x, y)

    def is_visible(self, x, y):
        if self.origin is None:
            return False
        return max(abs(x - self.origin[0]), abs(y - self.origin[1])) <= 1


def test_frame_before_first_tick_shows_only_the_player():
    s = GameState(seed=4, oracle_factory=NearOracle)
    frame = build_frame(s)
    assert len(frame) == s.grid.height and len(frame[0]) == s.grid.width
    px, py = s.player.pos
    assert frame[py][px].glyph == "@"
    assert all(c.bg is None for row in frame for c in row)
    assert sum(1 for row in frame for c in row if c.glyph.strip()) == 1


def test_monsters_drawn_only_when_visible():
    s = GameState(seed=4, oracle_factory=NearOracle)
    del s.entities[1:]
    px, py = s.player.pos
    near, far = make_orc(px + 1, py), make_orc(px + 3, py)
    s.entities += [near, far]
    s.tick()
    frame = build_frame(s)
    assert frame[py][px + 1].glyph == "o"
    assert frame[py][px + 1].bg == COLOR_LIGHT_GROUND
    assert frame[py][px + 3].glyph == " "


def test_snapshot_png(tmp_path):
    s = GameState(seed=4)
    s.tick()
    out = save_png(s, str(tmp_path / "shots" / "level.png"), cell=4)
    img = Image.open(out)
    assert img.size == (s.grid.width * 4, s.grid.height * 4)

    px, py = s.player.pos
    unknown = next(
        (x, y) for x, y in s.grid.coords()
        if not s.grid.tile(x, y).explored and max(abs(x - px), abs(y - py)) > 15
    )
    assert img.convert("RGB").getpixel((unknown[0] * 4, unknown[1] * 4)) == (0, 0, 0)
