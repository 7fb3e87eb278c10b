from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .tiles import Tile

XY = Tuple[int, int]


@dataclass
class Grid:
    width: int
    height: int
    rows: List[List[Tile]]  # rows[y][x]

    @classmethod
    def filled_with_walls(cls, width: int, height: int) -> "Grid":
        rows = [[Tile.wall() for _ in range(width)] for _ in range(height)]
        return cls(width=width, height=height, rows=rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return self.rows[y][x]

    def is_blocked(self, x: int, y: int) -> bool:
        # Anything past the edge behaves like solid rock.
        if not self.in_bounds(x, y):
            return True
        return self.rows[y][x].blocked

    def carve(self, x: int, y: int) -> None:
        """Excavate one tile to floor. The explored bit is left alone."""
        t = self.rows[y][x]
        t.blocked = False
        t.block_sight = False

    def explore(self, x: int, y: int) -> None:
        self.rows[y][x].explored = True

    def coords(self) -> Iterator[XY]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def transparency(self) -> List[List[bool]]:
        return [[t.transparent for t in row] for row in self.rows]

    def walkability(self) -> List[List[bool]]:
        return [[t.walkable for t in row] for row in self.rows]

    def floor_count(self) -> int:
        return sum(1 for row in self.rows for t in row if not t.blocked)

    def to_ascii(self, marks: Optional[Iterable[Tuple[int, int, str]]] = None) -> str:
        out = [["." if not t.blocked else "#" for t in row] for row in self.rows]
        for x, y, ch in marks or ():
            if self.in_bounds(x, y):
                out[y][x] = ch
        return "\n".join("".join(row) for row in out)
