"""Capture counters.

``CaptureCount`` holds the number of stones captured by each side. What
"captured by" means is up to the rule engine driving the position; this model
only stores the tallies and keeps them non-negative.
"""

from dataclasses import dataclass, replace

from go_position.types import CellState


@dataclass(frozen=True)
class CaptureCount:
    """Per-side capture tallies.

    Attributes:
        black: Stones captured by Black.
        white: Stones captured by White.
    """

    black: int = 0
    white: int = 0

    def __post_init__(self) -> None:
        if self.black < 0 or self.white < 0:
            raise ValueError(
                f"Capture counts must be non-negative, got {(self.black, self.white)}"
            )

    def for_color(self, color: CellState) -> int:
        """Return the tally of ``color`` (``BLACK`` or ``WHITE``)."""
        color = CellState(color)
        if color is CellState.BLACK:
            return self.black
        if color is CellState.WHITE:
            return self.white
        raise ValueError(f"No capture count for {color!r}")

    def added(self, color: CellState, count: int) -> "CaptureCount":
        """Return a copy with ``count`` more captures credited to ``color``."""
        if count < 0:
            raise ValueError(f"Cannot add a negative capture count: {count}")
        color = CellState(color)
        if color is CellState.BLACK:
            return replace(self, black=self.black + count)
        if color is CellState.WHITE:
            return replace(self, white=self.white + count)
        raise ValueError(f"No capture count for {color!r}")
