import argparse
import logging
import sys
from typing import List

from tqdm import tqdm

from hanoi_core import CENTER_PEG, PuzzleState, Snapshot
from hanoi_solver import minimum_moves, solve_moves

MAX_LEVELS = 10  # Nombre de niveaux à tester


def check_invariants(snapshot: Snapshot, levels: int) -> List[str]:
    """Return the invariant violations found in ``snapshot``."""
    problems = []
    for peg, stack in enumerate(snapshot):
        if any(lower <= upper for lower, upper in zip(stack, stack[1:])):
            problems.append(f"peg {peg} not strictly decreasing: {stack}")
    disks = sorted(d for stack in snapshot for d in stack)
    if disks != list(range(1, levels + 1)):
        problems.append(f"disks are {disks}, expected 1..{levels}")
    return problems


def audit_solver(max_levels: int = MAX_LEVELS) -> int:
    """Replay the solver for 1..max_levels disks and return the error count."""
    total_moves = 0
    errors = 0

    print(f"🔎 Audit du solveur pour 1 à {max_levels} niveaux...")

    for levels in tqdm(range(1, max_levels + 1), desc="levels"):
        state = PuzzleState(levels)
        for step, (from_peg, to_peg) in enumerate(solve_moves(levels), 1):
            if not state.apply_move(from_peg, to_peg):
                print(f"❌ {levels} niveaux: coup {step} {from_peg} -> {to_peg} refusé")
                errors += 1
                break
            problems = check_invariants(state.snapshot(), levels)
            if problems:
                for problem in problems:
                    print(f"⚠️ {levels} niveaux, coup {step}: {problem}")
                errors += 1
                break

        expected = minimum_moves(levels)
        if state.move_count() != expected:
            print(f"❌ {levels} niveaux: {state.move_count()} coups au lieu de {expected}")
            errors += 1
        if not state.is_solved(CENTER_PEG):
            print(f"❌ {levels} niveaux: puzzle non résolu")
            errors += 1
        total_moves += state.move_count()
        logging.debug("Audited %d levels in %d moves", levels, state.move_count())

    print("\n📊 Résumé :")
    print(f"- Total de coups analysés : {total_moves}")
    print(f"- Erreurs détectées : {errors}")
    if errors:
        print("❌ Le solveur a produit des coups incorrects.")
    else:
        print("✅ Solutions optimales et règles respectées.")
    return errors


def main() -> None:
    logging.basicConfig(format="%(asctime)s | %(levelname)s | %(message)s", level=logging.INFO)
    parser = argparse.ArgumentParser(description="Audit the Tower of Hanoi solver")
    parser.add_argument(
        "--max-levels", type=int, default=MAX_LEVELS, help="Tester de 1 à N niveaux"
    )
    args = parser.parse_args()
    sys.exit(1 if audit_solver(args.max_levels) else 0)


if __name__ == "__main__":
    main()
