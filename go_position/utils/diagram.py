"""Plain-text board diagrams.

Used to build fixtures and to eyeball positions while debugging; this is not a
rendering layer. One line per ``y``, cells ``x = 0 .. size - 1`` left to right::

    . . X
    . O .
    . . .

describes a 3x3 board with Black at ``(2, 0)`` and White at ``(1, 1)``.
"""

from typing import Dict, List

from go_position.position import Position
from go_position.types import CellState

BLACK_STONE = "X"
WHITE_STONE = "O"
EMPTY_POINT = "."

_SYMBOLS: Dict[CellState, str] = {
    CellState.BLACK: BLACK_STONE,
    CellState.WHITE: WHITE_STONE,
    CellState.EMPTY: EMPTY_POINT,
}

# Unicode aliases accepted on input
_PARSE: Dict[str, CellState] = {
    BLACK_STONE: CellState.BLACK,
    WHITE_STONE: CellState.WHITE,
    EMPTY_POINT: CellState.EMPTY,
    "●": CellState.BLACK,
    "○": CellState.WHITE,
    "·": CellState.EMPTY,
}


def to_diagram(position: Position) -> str:
    """Return the diagram of ``position`` (no trailing newline)."""
    array = position.to_array()
    rows: List[str] = []
    for y in range(position.size):
        rows.append(
            " ".join(_SYMBOLS[CellState(int(array[x, y]))] for x in range(position.size))
        )
    return "\n".join(rows)


def from_diagram(text: str, turn: CellState = CellState.BLACK) -> Position:
    """Build a position from a diagram.

    Whitespace between cells is optional and blank lines around the diagram
    are ignored.

    Arguments:
        text: Diagram, one line per ``y``.
        turn: Side to move in the returned position.

    Raises:
        ValueError: Unknown symbol, or the diagram is not square.
    """
    rows = [
        [ch for ch in line if not ch.isspace()]
        for line in text.strip().splitlines()
    ]
    size = len(rows)
    if size == 0:
        raise ValueError("Empty diagram")
    position = Position(size)
    for y, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(
                f"Diagram row {y} has {len(row)} cells, expected {size}"
            )
        for x, symbol in enumerate(row):
            if symbol not in _PARSE:
                raise ValueError(f"Unknown diagram symbol {symbol!r} at {(x, y)}")
            position.set(x, y, _PARSE[symbol])
    position.turn = turn
    return position
