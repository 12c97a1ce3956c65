import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from hanoi_core import PuzzleState
from utils.render import (
    INTRODUCTION,
    error_text,
    format_base,
    format_cell,
    format_towers,
    success_text,
)

START_4 = "\n".join(
    [
        "Level",
        " 4     -|-         |          |     ",
        " 3    --|--        |          |     ",
        " 2   ---|---       |          |     ",
        " 1  ----|----      |          |     ",
        "   -----+----------+----------+-----",
        "Peg     0          1          2     ",
    ]
)

SOLVED_4 = "\n".join(
    [
        "Level",
        " 4      |         -|-         |     ",
        " 3      |        --|--        |     ",
        " 2      |       ---|---       |     ",
        " 1      |      ----|----      |     ",
        "   -----+----------+----------+-----",
        "Peg     0          1          2     ",
    ]
)


def test_format_cell():
    assert format_cell(0, 2) == "   |   "
    assert format_cell(1, 2) == "  -|-  "
    assert format_cell(2, 2) == " --|-- "


def test_format_base():
    assert format_base(1) == "   --+----+----+--\nPeg  0    1    2  "


def test_start_layout_matches_golden_output():
    state = PuzzleState(4)
    assert format_towers(state.snapshot(), 4) == START_4


def test_solved_layout_matches_golden_output():
    snapshot = ((), (4, 3, 2, 1), ())
    assert format_towers(snapshot, 4) == SOLVED_4


def test_rows_have_equal_width():
    state = PuzzleState(3)
    state.apply_move(0, 2)
    state.apply_move(0, 1)
    lines = format_towers(state.snapshot(), 3).splitlines()
    assert len(lines) == 1 + 3 + 2
    assert len({len(line) for line in lines[1:]}) == 1
    assert lines[3] == " 1  ---|---   --|--     -|-   "


def test_introduction_mentions_rules():
    assert "Welcome to the Tower Of Hanoi Game" in INTRODUCTION
    assert "a larger disk cannot be placed on a smaller disk." in INTRODUCTION


def test_colored_messages_keep_text():
    assert "Invalid move" in error_text("Invalid move")
    assert "You won" in success_text("You won")
