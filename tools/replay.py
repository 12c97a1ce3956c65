import argparse
import csv
import logging
import os
import time
from typing import Any, Callable, Dict, Iterable, List, Tuple

from hanoi_core import CENTER_PEG, PuzzleState
from utils.config import get_config_value, load_settings
from utils.render import format_towers

FIELDS = ["step", "from_peg", "to_peg", "valid", "moves"]


def save_session(path: str, levels: int, history: Iterable[Tuple[int, int, bool]]) -> None:
    """Write the move attempts of a session to a CSV file."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    moves = 0
    attempts = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(f"# levels={levels}\n")
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        for step, (from_peg, to_peg, valid) in enumerate(history, 1):
            attempts = step
            if valid:
                moves += 1
            writer.writerow(
                {
                    "step": step,
                    "from_peg": from_peg,
                    "to_peg": to_peg,
                    "valid": valid,
                    "moves": moves,
                }
            )
    logging.info("Session with %d attempts saved to %s", attempts, path)


def load_session(path: str) -> Tuple[int, List[Dict[str, Any]]]:
    """Load a recorded session into its level count and a list of step dicts."""
    levels = None
    steps: List[Dict[str, Any]] = []
    with open(path, "r", encoding="utf-8") as f:
        lines = []
        for line in f:
            if line.startswith("#"):
                key, _, value = line[1:].strip().partition("=")
                if key.strip() == "levels":
                    levels = int(value)
                continue
            lines.append(line)
        reader = csv.DictReader(lines)
        for row in reader:
            row["step"] = int(row["step"])
            row["from_peg"] = int(row["from_peg"])
            row["to_peg"] = int(row["to_peg"])
            row["valid"] = row["valid"].lower() == "true"
            row["moves"] = int(row["moves"])
            steps.append(row)
    if levels is None:
        raise ValueError(f"Missing '# levels=' header in {path}")
    return levels, steps


def replay_session(
    levels: int,
    steps: List[Dict[str, Any]],
    delay: float = 0.0,
    out: Callable[[str], None] = print,
) -> PuzzleState:
    """Re-apply recorded steps to a fresh puzzle, printing each one."""
    state = PuzzleState(levels)
    out(format_towers(state.snapshot(), levels))
    for row in steps:
        ok = state.apply_move(row["from_peg"], row["to_peg"])
        out(
            f"Step {row['step']} | {row['from_peg']} -> {row['to_peg']} | "
            f"valid={ok} | moves={state.move_count()}"
        )
        if ok != row["valid"]:
            logging.warning(
                "Step %d: recorded valid=%s but engine returned %s, stopping replay",
                row["step"],
                row["valid"],
                ok,
            )
            break
        if ok:
            out(format_towers(state.snapshot(), levels))
        time.sleep(max(delay, 0))
    return state


def main() -> None:
    logging.basicConfig(format="%(asctime)s | %(levelname)s | %(message)s", level=logging.INFO)
    parser = argparse.ArgumentParser(description="Replay a recorded Tower of Hanoi session")
    parser.add_argument("--file", required=True, help="CSV session file")
    parser.add_argument("--delay", type=float, default=0.5, help="Delay between steps in seconds")
    parser.add_argument("--config", default=None, help="YAML settings file (game.target_peg)")
    args = parser.parse_args()

    settings = load_settings(args.config)
    target = get_config_value(settings, "game.target_peg", CENTER_PEG)
    levels, steps = load_session(args.file)
    state = replay_session(levels, steps, args.delay)
    print(
        f"Replayed {len(steps)} steps, {state.move_count()} moves, "
        f"solved={state.is_solved(target)} (target peg {target})"
    )


if __name__ == "__main__":
    main()
