"""Gymnasium environment wrapper for the Tower of Hanoi puzzle."""
from __future__ import annotations

import numpy as np
import gymnasium as gym
from typing import Tuple, Dict, Any, List, Optional

from hanoi_core import ACTIONS, CENTER_PEG, PuzzleState, move_from_index, move_index
from utils.render import format_towers

from .reward import ILLEGAL_MOVE_PENALTY, SOLVED_BONUS, STEP_PENALTY, compute_reward
from .state_utils import encode_observation


class HanoiEnv(gym.Env):
    """Environment wrapping :class:`hanoi_core.PuzzleState` for RL."""

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        levels: int = 3,
        target_peg: int = CENTER_PEG,
        max_steps: Optional[int] = 200,
        illegal_move_penalty: float = ILLEGAL_MOVE_PENALTY,
        step_penalty: float = STEP_PENALTY,
        solved_bonus: float = SOLVED_BONUS,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        self.levels = levels
        self.target_peg = target_peg
        self.max_steps = max_steps
        self.illegal_move_penalty = illegal_move_penalty
        self.step_penalty = step_penalty
        self.solved_bonus = solved_bonus
        self.render_mode = render_mode
        self.state: PuzzleState | None = None
        self.steps = 0
        self.action_space = gym.spaces.Discrete(len(ACTIONS))
        self.observation_space = self._make_observation_space(levels)

    @staticmethod
    def _make_observation_space(levels: int) -> gym.spaces.Box:
        return gym.spaces.Box(0.0, 1.0, shape=(3 * levels,), dtype=np.float32)

    @classmethod
    def from_config(cls, config: Any, **kwargs: Any) -> "HanoiEnv":
        """Build an environment from the ``env`` section of the settings."""
        env_cfg = config.get("env", {}) or {}
        game_cfg = config.get("game", {}) or {}
        params = {
            "levels": int(env_cfg.get("levels", 3)),
            "target_peg": int(game_cfg.get("target_peg", CENTER_PEG)),
            "max_steps": env_cfg.get("max_steps", 200),
            "illegal_move_penalty": float(env_cfg.get("illegal_move_penalty", ILLEGAL_MOVE_PENALTY)),
            "step_penalty": float(env_cfg.get("step_penalty", STEP_PENALTY)),
            "solved_bonus": float(env_cfg.get("solved_bonus", SOLVED_BONUS)),
        }
        params.update(kwargs)
        return cls(**params)

    def _encode_state(self) -> np.ndarray:
        if self.state is None:
            return np.zeros(3 * self.levels, dtype=np.float32)
        return encode_observation(self.state.to_dict())

    def _info(self) -> Dict[str, Any]:
        moves = self.state.move_count() if self.state is not None else 0
        return {"levels": self.levels, "moves": moves}

    def reset(
        self, seed: int | None = None, options: dict | None = None
    ) -> Tuple[np.ndarray, dict]:
        """Reset environment and return initial observation.

        Parameters
        ----------
        seed:
            Forwarded to :class:`gymnasium.Env`; the puzzle itself is
            deterministic.
        options:
            ``{"levels": n}`` starts a puzzle of a different size.
        """
        super().reset(seed=seed)
        if options and "levels" in options:
            self.levels = int(options["levels"])
            self.observation_space = self._make_observation_space(self.levels)
        self.state = PuzzleState(self.levels)
        self.steps = 0
        return self._encode_state(), self._info()

    def get_valid_actions(self) -> List[int]:
        """Return currently valid action indices."""
        if self.state is None:
            return []
        return [move_index(m) for m in self.state.legal_moves()]

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """Apply an action to the puzzle."""
        assert self.state is not None, "Environment not initialized"

        prev = self.state.to_dict()
        move = move_from_index(int(action))
        if move is None:
            valid = False
        else:
            valid = self.state.apply_move(*move)
        self.steps += 1

        terminated = self.state.is_solved(self.target_peg)
        truncated = bool(
            not terminated and self.max_steps is not None and self.steps >= self.max_steps
        )
        reward = compute_reward(
            prev,
            self.state.to_dict(),
            valid,
            done=terminated and valid,
            target_peg=self.target_peg,
            illegal_move_penalty=self.illegal_move_penalty,
            step_penalty=self.step_penalty,
            solved_bonus=self.solved_bonus,
        )
        info = self._info()
        info.update({"valid": bool(valid), "move": move})
        return self._encode_state(), reward, terminated, truncated, info

    def render(self) -> str | None:
        if self.render_mode != "ansi" or self.state is None:
            return None
        return format_towers(self.state.snapshot(), self.levels)
