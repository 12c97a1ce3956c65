import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from env.state_utils import count_empty_pegs, encode_observation, get_top_disks, settled_disks
from hanoi_core import PuzzleState


def test_state_analysis_utils():
    state = PuzzleState(3)
    state.apply_move(0, 2)
    state_dict = state.to_dict()

    assert get_top_disks(state_dict) == {0: 2, 1: None, 2: 1}
    assert count_empty_pegs(state_dict) == 1


def test_settled_disks_counts_from_the_bottom():
    assert settled_disks({"levels": 3, "pegs": [[], [3, 2], [1]]}) == 2
    assert settled_disks({"levels": 3, "pegs": [[3], [2, 1], []]}) == 0
    assert settled_disks({"levels": 3, "pegs": [[], [3, 2, 1], []]}) == 3
    assert settled_disks({"levels": 3, "pegs": [[], [], [3, 2, 1]]}, target_peg=2) == 3
    assert settled_disks({"levels": 3, "pegs": [[3, 2, 1], [], []]}, target_peg=9) == 0


def test_encode_observation_one_hot():
    obs = encode_observation({"levels": 2, "pegs": [[2], [], [1]]})
    assert obs.dtype == np.float32
    assert obs.shape == (6,)
    # disk 1 on peg 2, disk 2 on peg 0
    assert obs.tolist() == [0.0, 0.0, 1.0, 1.0, 0.0, 0.0]


def test_encode_observation_sums_to_levels():
    state = PuzzleState(4)
    state.apply_move(0, 1)
    state.apply_move(0, 2)
    obs = encode_observation(state.to_dict())
    assert obs.sum() == pytest.approx(4.0)
    assert np.all(obs.reshape(4, 3).sum(axis=1) == 1.0)
