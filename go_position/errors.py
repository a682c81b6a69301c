"""Error taxonomy.

Every exception derives from :class:`PositionError` and from the matching
builtin, so callers may catch either ``PositionError`` or e.g. ``IndexError``.
Operations validate their input before mutating anything; a raised error
always leaves the receiver unchanged.
"""


class PositionError(Exception):
    """Base class for position model errors."""


class OutOfRangeError(PositionError, IndexError):
    """Coordinate outside ``[0, size) x [0, size)`` used for a write."""

    def __init__(self, x: int, y: int, size: int) -> None:
        super().__init__(f"Out of bounds: {(x, y)} for board {size}x{size}")
        self.x = x
        self.y = y
        self.size = size


class SizeMismatchError(PositionError, ValueError):
    """Two positions of different sizes were combined."""

    def __init__(self, size: int, other_size: int) -> None:
        super().__init__(f"Board size mismatch: {size} vs {other_size}")
        self.size = size
        self.other_size = other_size


class InvalidSizeError(PositionError, ValueError):
    """Board size that is not a positive integer."""
