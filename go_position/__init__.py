"""go_position
=================

In-memory model of a Go board position: the stone grid, per-side capture
counts and the side to move, plus cloning and a structural diff
(:class:`ChangeSet`) between two positions. Rules, records and rendering live
elsewhere and consume this model::

    from go_position import CellState, Position

    before = Position(9)
    after = before.clone().set(2, 3, CellState.BLACK)
    before.compare(after).as_dict()
    # {'add': [{'x': 2, 'y': 3, 'color': <CellState.BLACK: 1>}], 'remove': []}
"""

from go_position.captures import CaptureCount
from go_position.changes import ChangeSet, StoneAdd, StoneRemove
from go_position.errors import (
    InvalidSizeError,
    OutOfRangeError,
    PositionError,
    SizeMismatchError,
)
from go_position.position import Position
from go_position.types import DEFAULT_SIZE, CellState, Coord

__all__ = [
    "CaptureCount",
    "CellState",
    "ChangeSet",
    "Coord",
    "DEFAULT_SIZE",
    "InvalidSizeError",
    "OutOfRangeError",
    "Position",
    "PositionError",
    "SizeMismatchError",
    "StoneAdd",
    "StoneRemove",
]
