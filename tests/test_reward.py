import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from env import reward


def test_illegal_move_penalty():
    s = {"levels": 2, "pegs": [[2, 1], [], []]}
    assert reward.compute_reward(s, s, valid=False, done=False) == reward.ILLEGAL_MOVE_PENALTY
    assert reward.compute_reward(s, s, valid=False, done=False, illegal_move_penalty=-5.0) == -5.0


def test_step_penalty_without_progress():
    before = {"levels": 2, "pegs": [[2, 1], [], []]}
    after = {"levels": 2, "pegs": [[2], [], [1]]}
    assert reward.compute_reward(before, after, valid=True, done=False) == pytest.approx(-0.01)


def test_progress_is_rewarded():
    before = {"levels": 2, "pegs": [[2], [], [1]]}
    after = {"levels": 2, "pegs": [[], [2], [1]]}
    assert reward.compute_reward(before, after, valid=True, done=False) == pytest.approx(0.99)


def test_undoing_progress_is_penalized():
    before = {"levels": 2, "pegs": [[], [2], [1]]}
    after = {"levels": 2, "pegs": [[2], [], [1]]}
    assert reward.compute_reward(before, after, valid=True, done=False) == pytest.approx(-1.01)


def test_solved_bonus():
    before = {"levels": 2, "pegs": [[], [2], [1]]}
    after = {"levels": 2, "pegs": [[], [2, 1], []]}
    value = reward.compute_reward(before, after, valid=True, done=True)
    assert value == pytest.approx(-0.01 + 1.0 + reward.SOLVED_BONUS)
