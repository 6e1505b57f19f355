from enum import Enum


class Cell(Enum):
    """Contents of a single square. X always opens the game."""
    EMPTY = ""
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value
