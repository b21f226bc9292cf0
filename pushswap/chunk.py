"""Chunk sort: spread ranks into b by windows, then bring them back largest first."""

from __future__ import annotations

from .stacks import Stacks


def _rotate_b(stacks: Stacks, target: int) -> None:
    if target not in stacks.b:
        raise ValueError(f"rank {target} is not on stack b")
    position = stacks.b.index(target)
    if position <= target // 2:
        while stacks.b[0] != target:
            stacks.rb()
    else:
        while stacks.b[0] != target:
            stacks.rrb()


def _b_to_a(stacks: Stacks, size: int) -> None:
    target = size - 1
    while stacks.b:
        if stacks.b[0] == target:
            stacks.pa()
            target -= 1
        elif len(stacks.b) > 1 and stacks.b[1] == target:
            stacks.sb()
            stacks.pa()
            target -= 1
        else:
            _rotate_b(stacks, target)


def chunk_sort(stacks: Stacks, size: int, span: int) -> None:
    """Sort stack a, which holds the ranks 0 to size - 1, using windows of span."""
    if len(stacks.a) < 2:
        return
    pushed = 0
    while stacks.a:
        top = stacks.a[0]
        if top <= pushed:
            stacks.pb()
            pushed += 1
        elif top <= pushed + span:
            stacks.pb()
            stacks.rb()
            pushed += 1
        else:
            stacks.ra()
    _b_to_a(stacks, size)