"""Optimal solver for the three peg Tower of Hanoi.

Moving ``n`` disks from ``source`` to ``target`` first parks the ``n - 1``
smaller disks on ``aux``, moves the largest disk, then brings the ``n - 1``
disks back on top of it.  This yields the unique shortest solution of
``2 ** n - 1`` moves.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

import logging

from hanoi_core import CENTER_PEG, NUM_PEGS, SOURCE_PEG, Move, PuzzleState, is_peg_index

AUX_PEG = 2

MoveHook = Callable[[PuzzleState, Move], None]


class InconsistentStateError(RuntimeError):
    """Raised when the puzzle rejects a move produced by the solver."""


def minimum_moves(levels: int) -> int:
    """Return the length of the optimal solution for ``levels`` disks."""
    if levels < 0:
        raise ValueError(f"Number of disks cannot be negative, got {levels}")
    return 2 ** levels - 1


def _check_pegs(source: int, target: int, aux: int) -> None:
    pegs = (source, target, aux)
    if not all(is_peg_index(p) for p in pegs) or sorted(pegs) != list(range(NUM_PEGS)):
        raise ValueError(
            f"source, target and aux must be a permutation of 0, 1, 2; got {source!r}, {target!r}, {aux!r}"
        )


def _hanoi(n: int, source: int, target: int, aux: int) -> Iterator[Move]:
    # frames are (disks, source, target, aux, smaller_disks_parked)
    stack = [(n, source, target, aux, False)]
    while stack:
        k, src, dst, via, parked = stack.pop()
        if k == 0:
            continue
        if parked:
            yield (src, dst)
            stack.append((k - 1, via, dst, src, False))
        else:
            stack.append((k, src, dst, via, True))
            stack.append((k - 1, src, via, dst, False))


class Solution:
    """Lazy, restartable sequence of the optimal moves.

    Every iteration starts the move sequence over, so the same object can be
    replayed, compared against a list or fed to several consumers.
    """

    def __init__(
        self,
        levels: int,
        source: int = SOURCE_PEG,
        target: int = CENTER_PEG,
        aux: int = AUX_PEG,
    ) -> None:
        if isinstance(levels, bool) or not isinstance(levels, int):
            raise ValueError(f"Number of disks must be an integer, got {levels!r}")
        if levels < 0:
            raise ValueError(f"Number of disks cannot be negative, got {levels}")
        _check_pegs(source, target, aux)
        self.levels = levels
        self.source = source
        self.target = target
        self.aux = aux

    def __iter__(self) -> Iterator[Move]:
        return _hanoi(self.levels, self.source, self.target, self.aux)

    def __len__(self) -> int:
        return minimum_moves(self.levels)

    def __repr__(self) -> str:
        return (
            f"Solution(levels={self.levels}, source={self.source}, "
            f"target={self.target}, aux={self.aux})"
        )


def solve_moves(
    levels: int,
    source: int = SOURCE_PEG,
    target: int = CENTER_PEG,
    aux: int = AUX_PEG,
) -> Solution:
    """Return the optimal moves transferring ``levels`` disks to ``target``."""
    return Solution(levels, source, target, aux)


def solve(
    state: PuzzleState,
    levels: Optional[int] = None,
    source: int = SOURCE_PEG,
    target: int = CENTER_PEG,
    aux: int = AUX_PEG,
    on_move: Optional[MoveHook] = None,
) -> int:
    """Drive ``state`` through the optimal solution.

    Parameters
    ----------
    state:
        Puzzle to mutate, normally freshly initialised.
    levels:
        Number of disks to move, defaults to ``state.levels``.
    on_move:
        Optional hook called after every applied move, e.g. to render the
        towers.

    Returns
    -------
    int
        Number of moves applied.

    Raises
    ------
    InconsistentStateError
        If the state rejects one of the moves, which means it did not match
        the requested transfer.
    """
    if levels is None:
        levels = state.levels
    applied = 0
    for step, move in enumerate(solve_moves(levels, source, target, aux), 1):
        if not state.apply_move(*move):
            raise InconsistentStateError(
                f"Move {step} {move[0]} -> {move[1]} was rejected by {state!r}"
            )
        applied += 1
        if on_move is not None:
            on_move(state, move)
    logging.debug("Solver applied %d moves for %d levels", applied, levels)
    return applied


__all__ = [
    "AUX_PEG",
    "InconsistentStateError",
    "Solution",
    "minimum_moves",
    "solve",
    "solve_moves",
]
