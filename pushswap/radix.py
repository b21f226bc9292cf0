"""Binary radix sort over ranks."""

from __future__ import annotations

from .stacks import Stacks


def _count_bits(value: int) -> int:
    return 1 if value == 0 else max(value, 0).bit_length()


def _partition_by_bit(stacks: Stacks, bit: int) -> None:
    for _ in range(len(stacks.a)):
        if (stacks.a[0] >> bit) & 1 == 0:
            stacks.pb()
        else:
            stacks.ra()
    while stacks.b:
        stacks.pa()


def bit_radix(stacks: Stacks, size: int) -> None:
    """Sort stack a, which holds the ranks 0 to size - 1, one bit at a time."""
    if len(stacks.a) < 2:
        return
    for bit in range(_count_bits(size)):
        _partition_by_bit(stacks, bit)
    while stacks.b:
        stacks.pa()