"""Two-stack integer sorting with a restricted instruction set, and a checker."""

__version__ = "0.1.0"
__all__ = ["checker", "chunk", "errors", "parsing", "radix", "small_sort", "solver", "stacks"]