from typing import Dict

from .state_utils import settled_disks

ILLEGAL_MOVE_PENALTY = -1.0
STEP_PENALTY = -0.01
SOLVED_BONUS = 10.0


def compute_reward(
    prev_state: Dict,
    next_state: Dict,
    valid: bool,
    done: bool,
    target_peg: int = 1,
    illegal_move_penalty: float = ILLEGAL_MOVE_PENALTY,
    step_penalty: float = STEP_PENALTY,
    solved_bonus: float = SOLVED_BONUS,
) -> float:
    """Compute reward for a transition."""
    if not valid:
        return float(illegal_move_penalty)

    reward = step_penalty
    # progress: disks settled on the target peg, largest first
    reward += settled_disks(next_state, target_peg) - settled_disks(prev_state, target_peg)
    if done:
        reward += solved_bonus
    return float(reward)
