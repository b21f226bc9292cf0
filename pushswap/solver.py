"""Choose a sorting strategy by size and print the resulting operations."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .chunk import chunk_sort
from .errors import ERROR_MESSAGE, PushSwapError
from .parsing import parse_values
from .radix import bit_radix
from .small_sort import small_sort
from .stacks import Op, Stacks, is_sorted, rank


def _dispatch(stacks: Stacks, size: int) -> None:
    span = size // 10 - (size // 100) * 3
    if size <= 10:
        small_sort(stacks, size)
    elif size <= 100:
        chunk_sort(stacks, size, 18)
    elif size <= 500:
        chunk_sort(stacks, size, 45)
    elif size <= 1300:
        chunk_sort(stacks, size, span)
    else:
        bit_radix(stacks, size)


def solve(values: Sequence[int]) -> list[Op]:
    """Return the operations that sort the values onto stack a, smallest on top."""
    ranks = rank(list(values))
    if len(ranks) <= 1 or is_sorted(ranks):
        return []
    stacks = Stacks(ranks)
    _dispatch(stacks, len(ranks))
    return stacks.history


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the integers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_values(args)
    except PushSwapError:
        print(ERROR_MESSAGE, file=sys.stderr)
        return 1
    ops = solve(values)
    sys.stdout.write("".join(f"{op}\n" for op in ops))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())