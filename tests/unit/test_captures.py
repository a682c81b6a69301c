# tests/unit/test_captures.py

from dataclasses import FrozenInstanceError

import pytest

from go_position.captures import CaptureCount
from go_position.types import CellState


def test_defaults_to_zero() -> None:
    assert CaptureCount() == CaptureCount(black=0, white=0)


@pytest.mark.parametrize("black, white", [(-1, 0), (0, -1), (-5, -5)])
def test_negative_counts_rejected(black: int, white: int) -> None:
    with pytest.raises(ValueError):
        CaptureCount(black=black, white=white)


def test_is_frozen() -> None:
    counts = CaptureCount(1, 2)
    with pytest.raises(FrozenInstanceError):
        counts.black = 5  # type: ignore[misc]


def test_for_color() -> None:
    counts = CaptureCount(black=4, white=9)
    assert counts.for_color(CellState.BLACK) == 4
    assert counts.for_color(CellState.WHITE) == 9
    with pytest.raises(ValueError):
        counts.for_color(CellState.EMPTY)


def test_added_returns_new_instance() -> None:
    counts = CaptureCount(black=1, white=1)
    more = counts.added(CellState.WHITE, 3)
    assert more == CaptureCount(black=1, white=4)
    assert counts == CaptureCount(black=1, white=1)
    assert counts.added(CellState.BLACK, 0) == counts


@pytest.mark.parametrize(
    "color, count", [(CellState.EMPTY, 1), (CellState.BLACK, -2)]
)
def test_added_rejects_invalid(color: CellState, count: int) -> None:
    with pytest.raises(ValueError):
        CaptureCount().added(color, count)
