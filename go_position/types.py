"""Common type aliases and enumerations.

``CellState`` is the value stored in every grid cell of a
:class:`go_position.position.Position`. Members are integer valued so that a
zeroed grid is an empty board and the whole grid fits in one compact numeric
array.
"""

from enum import IntEnum
from typing import Tuple

# Board coordinate alias (x, y)
Coord = Tuple[int, int]

DEFAULT_SIZE = 19


class CellState(IntEnum):
    """State of a single board cell.

    Members:
        EMPTY: No stone.
        BLACK: Black stone (black also moves first).
        WHITE: White stone.
    """

    EMPTY = 0
    BLACK = 1
    WHITE = -1

    @property
    def is_stone(self) -> bool:
        return self is not CellState.EMPTY

    @property
    def opponent(self) -> "CellState":
        """Other stone color; ``EMPTY`` maps to itself."""
        return CellState(-self.value)


STONE_COLORS = (CellState.BLACK, CellState.WHITE)
