from tombcrawl.entity import make_orc, make_player
from tombcrawl.grid import Grid


def make_test_grid():
    # 6x5: rock rim, open interior, one pillar at (3,2)
    g = Grid.filled_with_walls(6, 5)
    for y in range(1, 4):
        for x in range(1, 5):
            g.carve(x, y)
    t = g.tile(3, 2)
    t.blocked = True
    t.block_sight = True
    return g


def test_walk_and_bump_into_walls():
    g = make_test_grid()
    p = make_player(1, 1)
    assert p.move_by(1, 0, g) and p.pos == (2, 1)
    assert not p.move_by(0, -1, g) and p.pos == (2, 1)   # rim
    assert p.move_by(0, 1, g) and p.pos == (2, 2)
    assert not p.move_by(1, 0, g) and p.pos == (2, 2)    # pillar


def test_out_of_bounds_is_blocked_not_an_error():
    g = Grid.filled_with_walls(3, 3)
    for x, y in g.coords():
        g.carve(x, y)
    p = make_player(0, 0)
    assert not p.move_by(-1, 0, g)
    assert not p.move_by(0, -1, g)
    p.x, p.y = 2, 2
    assert not p.move_by(1, 0, g)
    assert not p.move_by(0, 5, g)
    assert p.pos == (2, 2)


def test_blocking_entities_stop_movement_unless_dead():
    g = make_test_grid()
    p = make_player(1, 3)
    orc = make_orc(2, 3)
    others = [p, orc]
    assert not p.move_by(1, 0, g, others)
    orc.alive = False
    assert p.move_by(1, 0, g, others) and p.pos == (2, 3)


def test_monsters_collide_with_the_player_too():
    g = make_test_grid()
    p = make_player(2, 1)
    orc = make_orc(1, 1)
    assert not orc.move_by(1, 0, g, [p, orc])
    assert orc.move_by(0, 1, g, [p, orc]) and orc.pos == (1, 2)
