"""Board index arithmetic.

The grid is a flat row-major sequence where cell ``(x, y)`` lives at index
``x * size + y``. Functions here are pure and lightweight so they can sit in
inner loops.
"""

from go_position.types import Coord


def in_bounds(size: int, x: int, y: int) -> bool:
    """Return True if ``(x, y)`` lies on a ``size`` x ``size`` board."""
    return 0 <= x < size and 0 <= y < size


def to_index(size: int, x: int, y: int) -> int:
    """Flat grid index of ``(x, y)``; bounds are not checked."""
    return x * size + y


def from_index(size: int, index: int) -> Coord:
    """Inverse of :func:`to_index`."""
    return divmod(index, size)
