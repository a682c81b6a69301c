# tests/unit/test_diagram.py

import pytest

from go_position.types import CellState
from go_position.utils.diagram import from_diagram, to_diagram
from tests.test_utils import make_position


def test_to_diagram_rows_are_y() -> None:
    position = make_position(
        3, [(2, 0, CellState.BLACK), (1, 1, CellState.WHITE)]
    )
    assert to_diagram(position) == ". . X\n. O .\n. . ."


def test_from_diagram() -> None:
    position = from_diagram(
        """
        . . X
        . O .
        . . .
        """,
        turn=CellState.WHITE,
    )
    assert position.size == 3
    assert position.get(2, 0) is CellState.BLACK
    assert position.get(1, 1) is CellState.WHITE
    assert position.count(CellState.EMPTY) == 7
    assert position.turn is CellState.WHITE


def test_from_diagram_accepts_compact_and_unicode() -> None:
    assert from_diagram("X.\n.O") == from_diagram("● ·\n· ○")


@pytest.mark.parametrize(
    "text",
    [
        ". . X",  # one row, three cells
        ". .\n. . .",
        ". ?\n. .",
        "",
    ],
)
def test_from_diagram_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        from_diagram(text)


def test_round_trip() -> None:
    text = "X O . .\n. . . O\n. X . .\nO . . X"
    assert to_diagram(from_diagram(text)) == text
