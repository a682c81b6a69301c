"""Structural diff between two positions.

:meth:`go_position.position.Position.compare` returns a :class:`ChangeSet`
describing how to turn the *before* position into the *after* one:

* ``remove``: cells that held a stone before and are empty after.
* ``add``: every other differing cell, carrying the *after* color. A color
  change is therefore a single addition, never a removal plus an addition.

Both sequences are ordered by ascending cell index (``x * size + y``), so a
renderer can replay them deterministically. The sequences are persistent
vectors; a change set can be shared between consumers without copying.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from pyrsistent import pvector
from pyrsistent.typing import PVector

from go_position.types import CellState


@dataclass(frozen=True)
class StoneAdd:
    """Stone placed (or recolored) at ``(x, y)``.

    Attributes:
        x: First board coordinate.
        y: Second board coordinate.
        color: Cell state in the *after* position.
    """

    x: int
    y: int
    color: CellState


@dataclass(frozen=True)
class StoneRemove:
    """Stone lifted from ``(x, y)``."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeSet:
    """Ordered additions and removals between two positions."""

    add: PVector[StoneAdd] = field(default_factory=pvector)
    remove: PVector[StoneRemove] = field(default_factory=pvector)

    @property
    def is_empty(self) -> bool:
        return not self.add and not self.remove

    def __len__(self) -> int:
        return len(self.add) + len(self.remove)

    def as_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Plain-data form ``{"add": [{x, y, color}], "remove": [{x, y}]}``.

        Returns:
            Dict[str, List[Dict[str, Any]]]: Freshly built lists and dicts, safe
            to mutate or serialize. ``color`` stays a :class:`CellState`, which
            is an ``int`` subclass.
        """
        return {
            "add": [{"x": a.x, "y": a.y, "color": a.color} for a in self.add],
            "remove": [{"x": r.x, "y": r.y} for r in self.remove],
        }
