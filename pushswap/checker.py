"""Check that a list of instructions read from standard input sorts the arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import pairwise

from .errors import ERROR_MESSAGE, PushSwapError
from .parsing import parse_values
from .stacks import Op, Stacks

OK_MESSAGE = "OK"
KO_MESSAGE = "KO"


def parse_instruction(line: str) -> Op:
    """Turn one input line, with or without its newline, into an operation.

    Raises ValueError for anything that is not exactly an operation name.
    """
    name = line[:-1] if line.endswith("\n") else line
    try:
        return Op(name)
    except ValueError:
        raise ValueError(f"unknown instruction: {name!r}") from None


def run_instructions(values: Iterable[int], lines: Iterable[str]) -> Stacks:
    """Load the values onto stack a and perform every instruction in turn."""
    stacks = Stacks(values)
    for line in lines:
        stacks.apply(parse_instruction(line))
    return stacks


def is_solved(stacks: Stacks) -> bool:
    """True if b is empty and a is non-empty and strictly increasing from the top."""
    if stacks.b or not stacks.a:
        return False
    return all(first < second for first, second in pairwise(stacks.a))


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 0
    try:
        values = parse_values(args)
    except PushSwapError:
        print(ERROR_MESSAGE, file=sys.stderr)
        return 1
    try:
        stacks = run_instructions(values, sys.stdin)
    except ValueError:
        print(ERROR_MESSAGE, file=sys.stderr)
        return 1
    print(OK_MESSAGE if is_solved(stacks) else KO_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())