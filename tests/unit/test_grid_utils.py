# tests/unit/test_grid_utils.py

import pytest

from go_position.utils.grid import from_index, in_bounds, to_index


@pytest.mark.parametrize(
    "size, x, y, expected",
    [
        (9, 0, 0, True),
        (9, 8, 8, True),
        (9, 9, 0, False),
        (9, 0, 9, False),
        (9, -1, 4, False),
        (1, 0, 0, True),
    ],
)
def test_in_bounds(size: int, x: int, y: int, expected: bool) -> None:
    assert in_bounds(size, x, y) is expected


@pytest.mark.parametrize(
    "size, x, y, index",
    [(9, 0, 0, 0), (9, 0, 8, 8), (9, 1, 0, 9), (9, 2, 3, 21), (19, 18, 18, 360)],
)
def test_index_arithmetic(size: int, x: int, y: int, index: int) -> None:
    assert to_index(size, x, y) == index
    assert from_index(size, index) == (x, y)
