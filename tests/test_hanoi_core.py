import json
import os
import sys
import random

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from hanoi_core import (
    ACTIONS,
    PuzzleState,
    move_from_index,
    move_index,
    new_game,
)


def _assert_invariants(state: PuzzleState) -> None:
    snapshot = state.snapshot()
    for stack in snapshot:
        assert all(lower > upper for lower, upper in zip(stack, stack[1:]))
    disks = sorted(d for stack in snapshot for d in stack)
    assert disks == list(range(1, state.levels + 1))


def test_initialize_stacks_disks_on_first_peg():
    state = PuzzleState(4)
    assert state.snapshot() == ((4, 3, 2, 1), (), ())
    assert state.move_count() == 0
    assert state.levels == 4


def test_initialize_resets_state():
    state = new_game(3)
    assert state.apply_move(0, 2)
    state.initialize(2)
    assert state.snapshot() == ((2, 1), (), ())
    assert state.move_count() == 0


@pytest.mark.parametrize("levels", [0, -3, 2.5, "3", True, None])
def test_initialize_rejects_bad_levels(levels):
    with pytest.raises(ValueError):
        PuzzleState(levels)


def test_single_disk_scenario():
    state = PuzzleState(1)
    assert state.apply_move(0, 1)
    assert state.move_count() == 1
    assert state.is_solved(1)


def test_three_disk_manual_solution():
    state = PuzzleState(3)
    assert state.apply_move(0, 2)
    assert state.apply_move(0, 1)
    assert state.apply_move(2, 1)
    assert state.apply_move(0, 2)
    assert not state.is_solved(1)
    for move in [(1, 0), (1, 2), (0, 2)]:
        assert state.apply_move(*move)
    assert state.snapshot() == ((), (), (3, 2, 1))
    assert state.is_solved(2)
    assert not state.is_solved(1)


def test_three_disk_canonical_solution_to_center():
    state = PuzzleState(3)
    for move in [(0, 1), (0, 2), (1, 2), (0, 1), (2, 0), (2, 1), (0, 1)]:
        assert state.apply_move(*move)
    assert state.is_solved(1)
    assert state.move_count() == 7


def test_illegal_moves_leave_state_unchanged():
    state = PuzzleState(2)
    assert not state.apply_move(1, 2)
    assert state.apply_move(0, 1)
    before = state.snapshot()
    assert not state.apply_move(0, 1)
    assert state.snapshot() == before
    assert state.move_count() == 1


@pytest.mark.parametrize("peg", [0, 1, 2])
def test_self_move_always_fails(peg):
    state = PuzzleState(3)
    assert not state.apply_move(peg, peg)
    state.apply_move(0, peg if peg else 1)
    before = state.snapshot()
    assert not state.apply_move(peg, peg)
    assert state.snapshot() == before


@pytest.mark.parametrize("move", [(3, 0), (0, -1), (0, 3), (1.0, 2), (True, 2), ("0", "1")])
def test_invalid_peg_index_is_rejected(move, caplog):
    state = PuzzleState(3)
    with caplog.at_level("WARNING"):
        assert not state.apply_move(*move)
    assert state.snapshot() == ((3, 2, 1), (), ())
    assert state.move_count() == 0
    assert "invalid peg index" in caplog.text


def test_random_moves_keep_invariants():
    rng = random.Random(1234)
    state = PuzzleState(5)
    successes = 0
    for _ in range(500):
        before = state.snapshot()
        count = state.move_count()
        if state.apply_move(rng.randrange(3), rng.randrange(3)):
            successes += 1
            assert state.move_count() == count + 1
        else:
            assert state.snapshot() == before
            assert state.move_count() == count
        _assert_invariants(state)
    assert state.move_count() == successes


def test_queries_are_idempotent():
    state = PuzzleState(3)
    state.apply_move(0, 2)
    assert state.snapshot() == state.snapshot()
    assert state.is_solved() == state.is_solved()
    assert state.move_count() == 1


def test_snapshot_is_read_only():
    state = PuzzleState(2)
    snap = state.snapshot()
    with pytest.raises((TypeError, AttributeError)):
        snap[0].append(5)
    assert state.snapshot() == ((2, 1), (), ())


def test_is_solved_rejects_bad_target():
    state = PuzzleState(1)
    assert not state.is_solved(5)


def test_legal_moves_and_top_disk():
    state = PuzzleState(3)
    assert state.legal_moves() == [(0, 1), (0, 2)]
    state.apply_move(0, 1)
    assert state.top_disk(0) == 2
    assert state.top_disk(1) == 1
    assert state.top_disk(2) is None
    assert state.legal_moves() == [(0, 2), (1, 0), (1, 2)]


def test_to_json():
    state = PuzzleState(2)
    state.apply_move(0, 2)
    data = json.loads(state.to_json())
    assert data == {"levels": 2, "pegs": [[2], [], [1]], "moves": 1}


def test_move_index_roundtrip():
    assert len(ACTIONS) == 6
    for idx, move in enumerate(ACTIONS):
        assert move_index(move) == idx
        assert move_from_index(idx) == move


def test_move_index_invalid():
    assert move_index((1, 1)) == -1
    assert move_index((0, 3)) == -1
    assert move_index("bad") == -1
    assert move_from_index(6) is None
    assert move_from_index(-1) is None
