"""Summation: three ways to compute 1 + 2 + ... + n.

Invariants:
    - For every n >= 0 all three functions return n * (n + 1) // 2
      (the recursive one up to recursive_max_n())
    - sum of the empty range (n == 0) is 0
    - Negative n raises ValueError, non-int n raises TypeError

Design Decisions:
    - Integer floor division in the formula: exact for arbitrarily large n
    - Recursive variant is bounded by the interpreter recursion limit: n above
      recursive_max_n() raises ValueError instead of RecursionError
"""

import sys


def _check_n(n: int) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")


def sum_to_n_iterative(n: int) -> int:
    """Loop from 1 to n. O(n) time, O(1) space."""
    _check_n(n)
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_formula(n: int) -> int:
    """Gauss closed form. O(1) time and space."""
    _check_n(n)
    return n * (n + 1) // 2


def recursive_max_n() -> int:
    """Largest n sum_to_n_recursive accepts under the current recursion limit."""
    # Half the limit leaves room for the caller's own frames
    return sys.getrecursionlimit() // 2


def sum_to_n_recursive(n: int) -> int:
    """n + sum(n - 1). O(n) time and call-stack depth.

    Only defined up to recursive_max_n(); larger n raises ValueError.
    """
    _check_n(n)
    if n > recursive_max_n():
        raise ValueError(
            f"n={n} exceeds recursion depth bound {recursive_max_n()}",
        )
    return _sum_down(n)


def _sum_down(n: int) -> int:
    if n <= 1:
        return n
    return n + _sum_down(n - 1)
