"""Console rendering of the towers."""
from __future__ import annotations

from typing import List, Sequence

from colored import Fore, Style

INTRODUCTION = "\n".join(
    [
        "",
        "",
        "  _____                               __   _   _                   _ ",
        " |_   _|____      _____ _ __    ___  / _| | | | | __ _ _ __   ___ (_)",
        "   | |/ _ \\ \\ /\\ / / _ \\ '__|  / _ \\| |_  | |_| |/ _` | '_ \\ / _ \\| |",
        "   | | (_) \\ V  V /  __/ |    | (_) |  _| |  _  | (_| | | | | (_) | |",
        "   |_|\\___/ \\_/\\_/ \\___|_|     \\___/|_|   |_| |_|\\__,_|_| |_|\\___/|_|",
        "",
        "",
        "Welcome to the Tower Of Hanoi Game. You are given a wooden board with three tall",
        "pegs in a row. Wooden disks are stacked in decreasing diameter on the left peg.",
        "The objective is to move the stack of disks from the left peg to the center peg",
        "in the same order as they began. Disks are moved from peg to peg, one at a time,",
        "and a larger disk cannot be placed on a smaller disk.",
        "",
        "Let's begin!",
        "",
    ]
)


def format_cell(disk: int, levels: int) -> str:
    """Return one peg position, ``disk == 0`` meaning no disk."""
    pad = " " * (levels - disk + 1)
    side = "-" * disk
    return f"{pad}{side}|{side}{pad}"


def format_base(levels: int, pegs: int = 3) -> str:
    """Return the base line and the peg labels under it."""
    dashes = "-" * (levels + 1)
    spaces = " " * (levels + 1)
    base = "   " + "".join(f"{dashes}+{dashes}" for _ in range(pegs))
    labels = "Peg" + "".join(f"{spaces}{peg}{spaces}" for peg in range(pegs))
    return f"{base}\n{labels}"


def format_towers(snapshot: Sequence[Sequence[int]], levels: int) -> str:
    """Render the pegs of ``snapshot`` (bottom to top) as text.

    The top level is printed first; every row is prefixed with its level
    number and all pegs share the same baseline.
    """
    lines: List[str] = ["Level"]
    for level in range(levels - 1, -1, -1):
        cells = []
        for stack in snapshot:
            disk = stack[level] if level < len(stack) else 0
            cells.append(format_cell(disk, levels))
        lines.append(f"{level + 1:2d} " + "".join(cells))
    lines.append(format_base(levels, len(snapshot)))
    return "\n".join(lines)


def error_text(message: str) -> str:
    return f"{Fore.red}{message}{Style.reset}"


def success_text(message: str) -> str:
    return f"{Style.bold}{Fore.green}{message}{Style.reset}"
