# pushswap

This package sorts a list of distinct integers with two stacks, `a` and `b`,
and a fixed set of instructions. It also checks whether a list of
instructions really sorts a given input.

## Instructions

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` at once (only if both hold two)  |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up (top goes to the bottom)         |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` at once                          |
| `rra` | rotate `a` down (bottom goes to the top)       |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` at once (only if both hold two)|

An instruction that finds too few elements to act on leaves the stacks as
they are.

## Installing

```
pip install .
```

## Solving

Pass the numbers as arguments. The first argument is the top of stack `a`.
The command prints the instructions that sort them, one per line.

```
push-swap 3 2 1
```

Each argument must be a whole number in the signed 32-bit range. Leading
whitespace and one sign are allowed, and no value may repeat. If any argument
breaks these rules, `Error` is written to standard error and the exit status
is 1. A single number, or input that is already sorted, produces no output.
With no arguments the command does nothing.

The sorting strategy depends on how many numbers there are:

- up to 10: a short selection routine
- up to 1300: a chunked strategy
- more than 1300: a binary radix sort

## Checking

The checker takes the numbers as arguments and reads instructions from
standard input, one per line. It applies the instructions to the numbers,
then prints `OK` when `a` is strictly increasing from the top and `b` is
empty, and `KO` otherwise.

An unknown instruction or bad input writes `Error` to standard error and the
exit status is 1. With fewer than two arguments the checker does nothing.

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

## Library use

```python
from pushswap.solver import solve
from pushswap.checker import run_instructions, is_solved

ops = solve([3, 2, 1])
stacks = run_instructions([3, 2, 1], [op.value for op in ops])
assert is_solved(stacks)
```

The package has these parts:

- `pushswap.stacks.Stacks` holds the two stacks as deques. Call a method named
  after an instruction (`sa`, `pb`, `rra`, ...) or use `apply`. Every
  instruction performed is recorded in `history` as a `pushswap.stacks.Op`.
  A reverse rotation that has nothing to rotate is not recorded.
- `pushswap.stacks.rank` replaces each value by its position in sorted order.
- `pushswap.stacks.is_sorted` reports whether a sequence never decreases.
- `pushswap.parsing.parse_int` turns one argument string into an integer.
- `pushswap.parsing.parse_values` turns a whole argument list into integers.
  Both raise a subclass of `pushswap.errors.PushSwapError` on bad input:
  `InvalidIntegerError`, `IntegerRangeError` or `DuplicateValueError`.
- `pushswap.small_sort`, `pushswap.chunk` and `pushswap.radix` hold the
  individual strategies. Each one works on a `Stacks` whose `a` holds ranks.

## Tests

```
pip install .[test]
pytest
```