"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Sequence
from itertools import pairwise


class Op(str, enum.Enum):
    """An operation, named as it is written in instruction lists."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _move_top(dst: deque[int], src: deque[int]) -> None:
    if src:
        dst.appendleft(src.popleft())


class Stacks:
    """Stacks a and b, top first, with a record of the operations performed.

    Reverse rotations on a stack with fewer than two items do nothing and are
    not recorded; every other operation is recorded even when it has no effect.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.history: list[Op] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Op | str) -> None:
        """Perform one operation given as an Op or its name."""
        getattr(self, Op(op).value)()

    def sa(self) -> None:
        _swap(self.a)
        self.history.append(Op.SA)

    def sb(self) -> None:
        _swap(self.b)
        self.history.append(Op.SB)

    def ss(self) -> None:
        if len(self.a) >= 2 and len(self.b) >= 2:
            _swap(self.a)
            _swap(self.b)
        self.history.append(Op.SS)

    def pa(self) -> None:
        _move_top(self.a, self.b)
        self.history.append(Op.PA)

    def pb(self) -> None:
        _move_top(self.b, self.a)
        self.history.append(Op.PB)

    def ra(self) -> None:
        _rotate(self.a)
        self.history.append(Op.RA)

    def rb(self) -> None:
        _rotate(self.b)
        self.history.append(Op.RB)

    def rr(self) -> None:
        _rotate(self.a)
        _rotate(self.b)
        self.history.append(Op.RR)

    def rra(self) -> None:
        if len(self.a) < 2:
            return
        _reverse_rotate(self.a)
        self.history.append(Op.RRA)

    def rrb(self) -> None:
        if len(self.b) < 2:
            return
        _reverse_rotate(self.b)
        self.history.append(Op.RRB)

    def rrr(self) -> None:
        if len(self.a) < 2 or len(self.b) < 2:
            return
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.history.append(Op.RRR)


def rank(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in sorted order.

    Equal values get consecutive ranks in order of appearance.
    """
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    for position, original in enumerate(order):
        ranks[original] = position
    return ranks


def is_sorted(items: Iterable[int]) -> bool:
    """True if the items never decrease from top to bottom."""
    return all(first <= second for first, second in pairwise(items))