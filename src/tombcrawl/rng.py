import random
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DungeonRandom:
    """Uniform sampling used by generation; all level randomness goes through here.

    Same seed -> same draw sequence -> same level.
    """

    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def randint(self, lo: int, hi: int) -> int:
        """Inclusive on both ends."""
        return self._rng.randint(lo, hi)

    def randrange(self, lo: int, hi: int) -> int:
        """Half-open [lo, hi). Raises ValueError when the range is empty."""
        return self._rng.randrange(lo, hi)

    def coin(self) -> bool:
        return self._rng.random() < 0.5

    def random(self) -> float:
        return self._rng.random()
