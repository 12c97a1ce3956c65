"""Expose environment helpers for easy import."""
from .hanoi_env import HanoiEnv

__all__ = [
    "HanoiEnv",
    "compute_reward",
    "count_empty_pegs",
    "encode_observation",
    "get_top_disks",
    "settled_disks",
]

from .reward import compute_reward
from .state_utils import count_empty_pegs, encode_observation, get_top_disks, settled_disks
