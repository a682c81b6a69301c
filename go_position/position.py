"""Mutable board position.

A :class:`Position` is the full board state at one point of a game: the stone
layout, the capture tallies and whose move is next. It enforces no game rules;
legality, captures and scoring belong to an external rule engine that drives
the position through :meth:`Position.set`, :meth:`Position.add_captures` and
the ``turn`` setter.

Design notes:

* The grid is one contiguous ``numpy`` ``int8`` array of ``size * size``
  cells, row-major with index ``x * size + y`` (see
  :mod:`go_position.utils.grid`). No per-row containers.
* ``get`` is total: off-board reads return ``None`` so callers probing
  neighbors at the edge can tell "off board" from "empty". Writes are checked
  and raise :class:`go_position.errors.OutOfRangeError`.
* ``clone`` is a deep copy of grid, captures and turn. ``clone(legacy=True)``
  reproduces the historical copy that kept only the grid and the black
  capture count.
"""

import logging
from typing import Iterator, Optional, Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent import pvector

from go_position.captures import CaptureCount
from go_position.changes import ChangeSet, StoneAdd, StoneRemove
from go_position.errors import InvalidSizeError, OutOfRangeError, SizeMismatchError
from go_position.types import DEFAULT_SIZE, STONE_COLORS, CellState
from go_position.utils.grid import from_index, in_bounds, to_index

logger = logging.getLogger(__name__)

Stone = Tuple[int, int, CellState]


class Position:
    """Stone layout, capture counts and turn of a square board.

    Attributes:
        size (int): Board dimension, fixed at construction.
        grid (npt.NDArray[np.int8]): Read-only flat view of the cells.
        cap_count (CaptureCount): Stones captured by each side.
        turn (CellState): Side to move, ``BLACK`` or ``WHITE``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise InvalidSizeError(f"Board size must be an integer, got {size!r}")
        if size <= 0:
            raise InvalidSizeError(f"Board size must be positive, got {size}")
        self._size = int(size)
        self._grid: npt.NDArray[np.int8] = np.zeros(
            self._size * self._size, dtype=np.int8
        )
        self._cap_count = CaptureCount()
        self._turn = CellState.BLACK

    # -------- Properties --------

    @property
    def size(self) -> int:
        return self._size

    @property
    def grid(self) -> npt.NDArray[np.int8]:
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def cap_count(self) -> CaptureCount:
        return self._cap_count

    @cap_count.setter
    def cap_count(self, value: CaptureCount) -> None:
        if not isinstance(value, CaptureCount):
            raise TypeError(f"Expected CaptureCount, got {type(value).__name__}")
        self._cap_count = value

    @property
    def turn(self) -> CellState:
        return self._turn

    @turn.setter
    def turn(self, color: CellState) -> None:
        color = CellState(color)
        if color not in STONE_COLORS:
            raise ValueError(f"Turn must be BLACK or WHITE, got {color!r}")
        self._turn = color

    # -------- Accessors --------

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies on the board."""
        return in_bounds(self._size, x, y)

    def get(self, x: int, y: int) -> Optional[CellState]:
        """Return the cell state at ``(x, y)``, or ``None`` when off board."""
        if not in_bounds(self._size, x, y):
            return None
        return CellState(int(self._grid[to_index(self._size, x, y)]))

    def stones(self, color: Optional[CellState] = None) -> Iterator[Stone]:
        """Yield ``(x, y, color)`` for occupied cells in ascending index order.

        Arguments:
            color: Restrict to one stone color. ``None`` yields both colors.
        """
        if color is None:
            mask = self._grid != CellState.EMPTY
        else:
            mask = self._grid == CellState(color)
        for index in np.flatnonzero(mask):
            x, y = from_index(self._size, int(index))
            yield x, y, CellState(int(self._grid[index]))

    def count(self, color: CellState) -> int:
        """Number of cells holding ``color`` (``EMPTY`` counts free cells)."""
        return int(np.count_nonzero(self._grid == CellState(color)))

    def to_array(self) -> npt.NDArray[np.int8]:
        """Independent ``(size, size)`` copy where ``array[x, y] == get(x, y)``."""
        return self._grid.reshape(self._size, self._size).copy()

    # -------- Mutators --------

    def set(self, x: int, y: int, color: CellState) -> "Position":
        """Write ``color`` at ``(x, y)`` and return ``self`` for chaining.

        Raises:
            OutOfRangeError: ``(x, y)`` is off the board.
            ValueError: ``color`` is not a :class:`CellState` value.
        """
        if not in_bounds(self._size, x, y):
            raise OutOfRangeError(x, y, self._size)
        self._grid[to_index(self._size, x, y)] = CellState(color)
        return self

    def clear(self) -> "Position":
        """Empty every cell. Captures and turn are left as they are."""
        self._grid.fill(CellState.EMPTY)
        return self

    def add_captures(self, color: CellState, count: int) -> "Position":
        """Credit ``count`` captured stones to ``color`` and return ``self``."""
        self._cap_count = self._cap_count.added(color, count)
        return self

    def apply(self, changes: ChangeSet) -> "Position":
        """Replay a :class:`ChangeSet` onto this position in place.

        Every coordinate is checked first, so an invalid change set leaves the
        position untouched.

        Raises:
            OutOfRangeError: A change refers to an off-board cell.
        """
        writes = [(r.x, r.y, CellState.EMPTY) for r in changes.remove]
        writes.extend((a.x, a.y, CellState(a.color)) for a in changes.add)
        for x, y, _ in writes:
            if not in_bounds(self._size, x, y):
                raise OutOfRangeError(x, y, self._size)
        for x, y, color in writes:
            self._grid[to_index(self._size, x, y)] = color
        return self

    # -------- Copy & diff --------

    def clone(self, legacy: bool = False) -> "Position":
        """Return a fully independent copy.

        Arguments:
            legacy: Reproduce the historical copy, which kept the grid and the
                black capture count only. The clone then has zero white
                captures and ``BLACK`` to move whatever the source holds.
        """
        clone = Position(self._size)
        clone._grid = self._grid.copy()
        if legacy:
            clone._cap_count = CaptureCount(black=self._cap_count.black)
            logger.debug(
                "Legacy clone of %dx%d position dropped white captures (%d) and turn (%s)",
                self._size,
                self._size,
                self._cap_count.white,
                self._turn.name,
            )
            return clone
        clone._cap_count = self._cap_count
        clone._turn = self._turn
        return clone

    def compare(self, other: "Position") -> ChangeSet:
        """Diff ``self`` (before) against ``other`` (after).

        A cell that held a stone and is empty in ``other`` is a removal; any
        other difference is an addition carrying ``other``'s color. Captures
        and turn are not compared.

        Returns:
            ChangeSet: Additions and removals, each in ascending cell index.

        Raises:
            SizeMismatchError: The positions have different sizes.
        """
        if other.size != self._size:
            raise SizeMismatchError(self._size, other.size)
        before = self._grid
        after = other._grid
        removed = (before != CellState.EMPTY) & (after == CellState.EMPTY)
        added = (before != after) & ~removed

        remove = pvector(
            StoneRemove(*from_index(self._size, int(i))) for i in np.flatnonzero(removed)
        )
        add = pvector(
            StoneAdd(*from_index(self._size, int(i)), color=CellState(int(after[i])))
            for i in np.flatnonzero(added)
        )
        logger.debug(
            "Compared %dx%d positions: %d added, %d removed",
            self._size,
            self._size,
            len(add),
            len(remove),
        )
        return ChangeSet(add=add, remove=remove)

    # -------- Dunder --------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self._size == other._size
            and bool(np.array_equal(self._grid, other._grid))
            and self._cap_count == other._cap_count
            and self._turn is other._turn
        )

    def __repr__(self) -> str:
        return (
            f"Position(size={self._size}, stones={self.count(CellState.BLACK)}B/"
            f"{self.count(CellState.WHITE)}W, captures=({self._cap_count.black}, "
            f"{self._cap_count.white}), turn={self._turn.name})"
        )
