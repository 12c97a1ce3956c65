"""Pure Python engine for the Tower of Hanoi puzzle.

The board is made of three pegs holding disks of sizes ``1..levels``
(``1`` is the smallest).  Each peg is a stack listed bottom to top.  The only
way to change a :class:`PuzzleState` is :meth:`PuzzleState.apply_move`,
which refuses any move that would put a disk on a smaller one, so every
reachable state keeps the pegs strictly decreasing and holds each disk
exactly once.

The move <-> index helpers give a stable numbering of the six possible
``(from_peg, to_peg)`` pairs, used by the reinforcement learning
environment.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import json
import logging

NUM_PEGS = 3
SOURCE_PEG = 0
CENTER_PEG = 1

Move = Tuple[int, int]
Snapshot = Tuple[Tuple[int, ...], ...]

# Every ordered pair of distinct pegs.  The position of a pair in this tuple
# is its action index.
ACTIONS: Tuple[Move, ...] = tuple(
    (from_peg, to_peg)
    for from_peg in range(NUM_PEGS)
    for to_peg in range(NUM_PEGS)
    if from_peg != to_peg
)


def is_peg_index(value: Any) -> bool:
    """Return ``True`` if ``value`` is an integer peg index in ``0..2``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value < NUM_PEGS


class PuzzleState:
    """Disk placement on the three pegs plus the count of successful moves."""

    def __init__(self, levels: int) -> None:
        self._levels = 0
        self._pegs: List[List[int]] = [[] for _ in range(NUM_PEGS)]
        self._moves = 0
        self.initialize(levels)

    def initialize(self, levels: int) -> None:
        """Stack disks ``levels..1`` on peg 0 and reset the move counter.

        Raises
        ------
        ValueError
            If ``levels`` is not an integer or is smaller than 1.
        """
        if isinstance(levels, bool) or not isinstance(levels, int):
            raise ValueError(f"Number of levels must be an integer, got {levels!r}")
        if levels < 1:
            raise ValueError(f"Number of levels must be at least 1, got {levels}")
        self._levels = levels
        self._pegs = [list(range(levels, 0, -1)), [], []]
        self._moves = 0

    @property
    def levels(self) -> int:
        return self._levels

    def top_disk(self, peg: int) -> Optional[int]:
        """Return the size of the top disk on ``peg`` or ``None`` if empty."""
        if not is_peg_index(peg):
            return None
        stack = self._pegs[peg]
        return stack[-1] if stack else None

    def can_move(self, from_peg: int, to_peg: int) -> bool:
        """Return ``True`` if moving the top disk of ``from_peg`` is legal."""
        if not (is_peg_index(from_peg) and is_peg_index(to_peg)):
            return False
        if from_peg == to_peg:
            return False
        disk = self.top_disk(from_peg)
        if disk is None:
            return False
        target = self.top_disk(to_peg)
        return target is None or target > disk

    def apply_move(self, from_peg: int, to_peg: int) -> bool:
        """Move the top disk of ``from_peg`` onto ``to_peg``.

        Returns ``False`` and leaves the state untouched when the move is
        illegal: equal pegs, empty source, a smaller disk on the target or an
        invalid peg index.
        """
        if not (is_peg_index(from_peg) and is_peg_index(to_peg)):
            logging.warning("Rejected move with invalid peg index: %r -> %r", from_peg, to_peg)
            return False
        if not self.can_move(from_peg, to_peg):
            logging.debug("Illegal move %d -> %d rejected", from_peg, to_peg)
            return False
        disk = self._pegs[from_peg].pop()
        self._pegs[to_peg].append(disk)
        self._moves += 1
        logging.debug("Moved disk %d from peg %d to peg %d", disk, from_peg, to_peg)
        return True

    def is_solved(self, target_peg: int = CENTER_PEG) -> bool:
        """Return ``True`` if every disk sits on ``target_peg``."""
        if not is_peg_index(target_peg):
            return False
        # pegs are always ordered, so holding every disk is enough
        return len(self._pegs[target_peg]) == self._levels

    def move_count(self) -> int:
        return self._moves

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the pegs, each listed bottom to top."""
        return tuple(tuple(stack) for stack in self._pegs)

    def legal_moves(self) -> List[Move]:
        """Return the legal moves in :data:`ACTIONS` order."""
        return [move for move in ACTIONS if self.can_move(*move)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "levels": self._levels,
            "pegs": [list(stack) for stack in self._pegs],
            "moves": self._moves,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __repr__(self) -> str:
        return f"PuzzleState(levels={self._levels}, pegs={self.snapshot()}, moves={self._moves})"


def new_game(levels: int) -> PuzzleState:
    """Create a fresh puzzle with all ``levels`` disks on peg 0."""
    return PuzzleState(levels)


def move_index(move: Move) -> int:
    """Return the stable index of ``move`` or ``-1`` if it is not a valid pair."""
    try:
        from_peg, to_peg = move
    except (TypeError, ValueError):
        return -1
    pair = (from_peg, to_peg)
    if not (is_peg_index(from_peg) and is_peg_index(to_peg)):
        return -1
    try:
        return ACTIONS.index(pair)
    except ValueError:
        return -1


def move_from_index(index: int) -> Optional[Move]:
    """Recover the ``(from_peg, to_peg)`` pair for ``index`` or ``None``."""
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    if not (0 <= index < len(ACTIONS)):
        return None
    return ACTIONS[index]


__all__ = [
    "ACTIONS",
    "CENTER_PEG",
    "NUM_PEGS",
    "SOURCE_PEG",
    "Move",
    "PuzzleState",
    "Snapshot",
    "is_peg_index",
    "move_from_index",
    "move_index",
    "new_game",
]
