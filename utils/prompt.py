"""Line prompts reading bounded answers from the user."""
from __future__ import annotations

from typing import Callable

import logging


def get_int(
    question: str,
    low: int,
    high: int,
    input_func: Callable[[str], str] = input,
) -> int:
    """Ask ``question`` until the answer is an integer in ``[low, high]``.

    ``EOFError`` raised by ``input_func`` is propagated so the caller can end
    the session.
    """
    if low > high:
        raise ValueError(f"Empty range: {low} > {high}")
    text = f"{question} ({low} - {high}) -> "
    while True:
        answer = input_func(text)
        try:
            value = int(str(answer).strip())
        except ValueError:
            logging.debug("Ignoring non integer answer %r", answer)
            continue
        if low <= value <= high:
            return value
        logging.debug("Ignoring out of range answer %d", value)
