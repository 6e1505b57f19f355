from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class Board:
    """Geometry of the square grid; side is fixed for the lifetime of a game."""
    side: int

    @property
    def cell_count(self) -> int:
        return self.side * self.side

    def coordinate(self, index: int) -> Tuple[int, int]:
        """Return (col, row) for a flat cell index."""
        return index % self.side, index // self.side
