from typing import Iterable, Iterator, Tuple

from go_position.position import Position
from go_position.types import CellState

StonePlacement = Tuple[int, int, CellState]


def make_position(
    size: int = 9,
    stones: Iterable[StonePlacement] = (),
    turn: CellState = CellState.BLACK,
    captures: Tuple[int, int] = (0, 0),
) -> Position:
    """Position with the given stones, turn and (black, white) captures."""
    position = Position(size)
    for x, y, color in stones:
        position.set(x, y, color)
    position.turn = turn
    position.add_captures(CellState.BLACK, captures[0])
    position.add_captures(CellState.WHITE, captures[1])
    return position


def all_coords(size: int) -> Iterator[Tuple[int, int]]:
    for x in range(size):
        for y in range(size):
            yield x, y
