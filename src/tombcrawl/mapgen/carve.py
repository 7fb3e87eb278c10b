# src/tombcrawl/mapgen/carve.py
# Room and corridor excavation. All functions write floor tiles in place and
# never touch the explored bit.

from ..grid import Grid
from ..rect import Rect


def create_room(grid: Grid, room: Rect) -> None:
    """Carve the strict interior; the border ring stays wall so neighbours
    that merely touch still have a wall between them."""
    for x, y in room.interior():
        grid.carve(x, y)


def create_h_tunnel(grid: Grid, x1: int, x2: int, y: int) -> None:
    # Endpoints may come in either order.
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid.carve(x, y)


def create_v_tunnel(grid: Grid, y1: int, y2: int, x: int) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid.carve(x, y)


def connect_centers(grid: Grid, prev_xy, new_xy, horizontal_first: bool) -> None:
    """One L-shaped corridor between two room centers.

    horizontal_first: along prev_y to new_x, then down/up new_x.
    otherwise:        along prev_x to new_y, then across new_y.
    """
    (px, py), (nx, ny) = prev_xy, new_xy
    if horizontal_first:
        create_h_tunnel(grid, px, nx, py)
        create_v_tunnel(grid, py, ny, nx)
    else:
        create_v_tunnel(grid, py, ny, px)
        create_h_tunnel(grid, px, nx, ny)
