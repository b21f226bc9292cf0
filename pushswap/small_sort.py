"""Sorting of stacks holding ten items or fewer."""

from __future__ import annotations

from .stacks import Stacks, rank


def sort_three(stacks: Stacks) -> None:
    """Sort the three items on top of stack a with at most two operations."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _move_to_top(stacks: Stacks, position: int, size: int) -> None:
    if position <= size // 2:
        for _ in range(position):
            stacks.ra()
    else:
        for _ in range(size - position):
            stacks.rra()


def under_ten_sort(stacks: Stacks, size: int) -> None:
    """Push the smallest ranks to b until three remain, sort those, push back.

    Stack a must hold the ranks 0 to size - 1.
    """
    target = 0
    while size > 3:
        _move_to_top(stacks, stacks.a.index(target), size)
        stacks.pb()
        if len(stacks.b) >= 2 and stacks.b[0] < stacks.b[1]:
            stacks.sb()
        size -= 1
        target += 1
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def small_sort(stacks: Stacks, size: int) -> None:
    """Replace stack a by its ranks and sort it, for sizes from 2 to 10."""
    ranks = rank(list(stacks.a))
    stacks.a.clear()
    stacks.a.extend(ranks)
    if size == 2:
        if stacks.a[0] > stacks.a[1]:
            stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size <= 10:
        under_ten_sort(stacks, size)