from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned room rectangle; the outer ring stays wall when carved."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def new(cls, x: int, y: int, w: int, h: int) -> "Rect":
        return cls(x, y, x + w, y + h)

    def center(self) -> Tuple[int, int]:
        # Coordinates are never negative, so // truncates the same way the
        # corridor layout expects (odd sizes lean toward x1/y1).
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects_with(self, other: "Rect") -> bool:
        # Closed intervals: touching edges or corners count as overlap.
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def interior(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y1 + 1, self.y2):
            for x in range(self.x1 + 1, self.x2):
                yield (x, y)
