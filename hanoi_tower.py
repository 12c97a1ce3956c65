"""Play or watch the Tower of Hanoi puzzle in the console.

Usage::

    hanoi-tower <levels> [play|solve] [--quiet] [--record session.csv]

The objective is to move the stack of disks from the left peg (0) to the
center peg (1) in the same order as they began, one disk at a time, never
placing a larger disk on a smaller one.
"""
from __future__ import annotations

import argparse
import enum
import logging
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from hanoi_core import CENTER_PEG, SOURCE_PEG, Move, PuzzleState
from hanoi_solver import minimum_moves, solve
from tools.replay import save_session
from utils.config import Settings, get_config_value, load_settings
from utils.prompt import get_int
from utils.render import INTRODUCTION, error_text, format_towers, success_text

EXIT_OK = 0
EXIT_BAD_LEVELS = 1
EXIT_USAGE = 2
EXIT_ABORTED = 130

Output = Callable[[str], None]


class SessionStatus(enum.Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"


class Session:
    """Interactive game: forwards move attempts until the puzzle is solved."""

    def __init__(self, state: PuzzleState, target_peg: int = CENTER_PEG) -> None:
        self.state = state
        self.target_peg = target_peg
        self.history: List[Tuple[int, int, bool]] = []
        self.status = SessionStatus.IN_PROGRESS
        if state.is_solved(target_peg):
            self.status = SessionStatus.SOLVED

    @property
    def solved(self) -> bool:
        return self.status is SessionStatus.SOLVED

    def submit(self, from_peg: int, to_peg: int) -> bool:
        """Try a move, returning whether it was applied.

        Completion is only checked after a successful move.  Once solved the
        session refuses every further move.
        """
        if self.solved:
            return False
        valid = self.state.apply_move(from_peg, to_peg)
        self.history.append((from_peg, to_peg, valid))
        if valid and self.state.is_solved(self.target_peg):
            self.status = SessionStatus.SOLVED
        return valid


def parse_levels(value: Optional[str]) -> int:
    """Convert the command line level count, raising ``ValueError`` on bad input."""
    if value is None:
        raise ValueError("Number of levels is required")
    try:
        levels = int(value)
    except ValueError as exc:
        raise ValueError("ERROR: Number of levels must be an integer") from exc
    if levels < 1:
        raise ValueError("ERROR: Number of levels must be at least 1.")
    return levels


def _show(state: PuzzleState, out: Output) -> None:
    out("\n" + format_towers(state.snapshot(), state.levels) + "\n")


def play_game(
    state: PuzzleState,
    settings: Settings,
    input_func: Callable[[str], str] = input,
    out: Output = print,
) -> Session:
    """Let the user play until every disk is on the target peg."""
    print_tower = bool(get_config_value(settings, "game.print_tower", True))
    target = get_config_value(settings, "game.target_peg", CENTER_PEG)
    session = Session(state, target)

    out(INTRODUCTION)
    while not session.solved:
        if print_tower:
            _show(state, out)
        from_peg = get_int("\nMove disk FROM peg", 0, 2, input_func)
        to_peg = get_int("          TO   peg", 0, 2, input_func)
        if from_peg == to_peg:
            session.submit(from_peg, to_peg)
            out(error_text("\nERROR: from and to pegs cannot be the same. Try again.\n"))
        elif not session.submit(from_peg, to_peg):
            out(error_text("\nERROR: Invalid move. Try again.\n"))

    _show(state, out)
    out(success_text("\nSUCCESS!!! You won!\n"))
    return session


def solve_puzzle(state: PuzzleState, settings: Settings, out: Output = print) -> int:
    """Solve the puzzle automatically and return the number of moves made."""
    print_tower = bool(get_config_value(settings, "game.print_tower", True))
    target = get_config_value(settings, "game.target_peg", CENTER_PEG)
    out("\nSolving the Tower of Hanoi puzzle automatically...\n")
    if target == SOURCE_PEG:
        return 0
    aux = 3 - target

    if print_tower:
        _show(state, out)
        return solve(state, target=target, aux=aux, on_move=lambda s, _move: _show(s, out))

    with tqdm(total=minimum_moves(state.levels), desc="moves", unit="move") as pbar:

        def _advance(_state: PuzzleState, _move: Move) -> None:
            pbar.update(1)

        return solve(state, target=target, aux=aux, on_move=_advance)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hanoi-tower", description="Tower of Hanoi puzzle")
    parser.add_argument("levels", nargs="?", help="Number of disks (at least 1)")
    parser.add_argument(
        "mode",
        nargs="?",
        type=str.lower,
        choices=["play", "solve"],
        default=None,
        help="play the game yourself or let the solver do it",
    )
    parser.add_argument("--config", default=None, help="Path to a YAML configuration file")
    parser.add_argument("--quiet", action="store_true", help="Do not print the towers after each move")
    parser.add_argument("--record", default=None, help="Save the move attempts of a game to CSV")
    parser.add_argument(
        "--log",
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level",
    )
    return parser


def run(
    argv: Optional[Sequence[str]] = None,
    input_func: Callable[[str], str] = input,
    out: Output = print,
) -> int:
    """Run the game and return the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return EXIT_USAGE if exc.code else EXIT_OK

    if args.levels is None:
        parser.print_usage(sys.stderr)
        return EXIT_USAGE
    try:
        levels = parse_levels(args.levels)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return EXIT_BAD_LEVELS

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_USAGE

    level_name = args.log_level or str(get_config_value(settings, "logging.level", "WARNING")).upper()
    logging.getLogger().setLevel(getattr(logging, level_name, logging.WARNING))
    if args.quiet:
        settings.game.print_tower = False
    mode = args.mode or str(get_config_value(settings, "game.mode", "play")).lower()

    state = PuzzleState(levels)
    if mode == "solve":
        solve_puzzle(state, settings, out)
    else:
        try:
            session = play_game(state, settings, input_func, out)
        except (EOFError, KeyboardInterrupt):
            logging.warning("Game interrupted after %d moves", state.move_count())
            return EXIT_ABORTED
        if args.record:
            save_session(args.record, levels, session.history)

    out(f"\nIt took you {state.move_count()} moves with {levels} levels.\n")
    return EXIT_OK


def main() -> None:
    logging.basicConfig(format="%(asctime)s | %(levelname)s | %(message)s", level=logging.WARNING)
    sys.exit(run())


if __name__ == "__main__":
    main()
