"""Utility helpers for analyzing JSON puzzle states."""
from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

NUM_PEGS = 3


def _pegs(state: Dict) -> List[List[int]]:
    pegs = state.get("pegs", [])
    return [list(p) if isinstance(p, (list, tuple)) else [] for p in pegs]


def _levels(state: Dict) -> int:
    try:
        return int(state.get("levels", 0))
    except (TypeError, ValueError):
        return sum(len(p) for p in _pegs(state))


def get_top_disks(state: Dict) -> Dict[int, Optional[int]]:
    """Return the top disk of every peg, ``None`` for empty pegs."""
    return {i: (peg[-1] if peg else None) for i, peg in enumerate(_pegs(state))}


def count_empty_pegs(state: Dict) -> int:
    """Count pegs without any disk."""
    return sum(1 for peg in _pegs(state) if not peg)


def settled_disks(state: Dict, target_peg: int = 1) -> int:
    """Number of disks already in their final place on ``target_peg``.

    Disks count from the bottom of the target peg while they match the
    final stack ``levels, levels - 1, ...``; a disk above a gap does not
    count.
    """
    pegs = _pegs(state)
    if not 0 <= target_peg < len(pegs):
        return 0
    expected = _levels(state)
    settled = 0
    for disk in pegs[target_peg]:
        if disk != expected:
            break
        settled += 1
        expected -= 1
    return settled


def encode_observation(state: Dict) -> np.ndarray:
    """Return a one-hot peg position for each disk, smallest disk first."""
    levels = _levels(state)
    obs = np.zeros((levels, NUM_PEGS), dtype=np.float32)
    for peg_idx, peg in enumerate(_pegs(state)[:NUM_PEGS]):
        for disk in peg:
            if 1 <= disk <= levels:
                obs[disk - 1, peg_idx] = 1.0
    return obs.reshape(-1)
