"""Solutions to three counting problems, with a command-line entry point.

The command takes a problem number and reads whitespace-separated integers
from standard input:

* ``1377``: N, then N values; prints the number of bubble-sort passes.
* ``2003``: N and M, then N values; prints how many contiguous runs sum to M.
* ``1253``: N, then N values; prints how many values are "good".
"""

from __future__ import annotations

import argparse
import sys


def bubble_sort_passes(values) -> int:
    """Return how many passes a bubble sort of ``values`` makes.

    An element moves left by at most one place per pass, so the count is the
    largest leftward move any element makes, plus the final pass that finds
    nothing to swap.
    """
    order = sorted((value, index) for index, value in enumerate(values))
    largest_move = max(
        (original - final for final, (_, original) in enumerate(order)),
        default=0,
    )
    return max(largest_move, 0) + 1


def count_subarrays_with_sum(values, target) -> int:
    """Count the contiguous runs of ``values`` that add up to ``target``.

    Uses a sliding window, so the values are expected to be positive.
    """
    data = list(values)
    if not data:
        return 0
    size = len(data)
    left = right = count = 0
    total = data[0]
    while right < size:
        if total == target:
            count += 1
            right += 1
            if right < size:
                total += data[right]
        elif total < target:
            right += 1
            if right < size:
                total += data[right]
        else:
            total -= data[left]
            left += 1
    return count


def count_good_numbers(values) -> int:
    """Count the values that equal the sum of two other values in the list.

    The two addends must sit at positions different from the value itself
    and from each other.
    """
    data = sorted(values)
    good = 0
    for i, wanted in enumerate(data):
        left, right = 0, len(data) - 1
        while left < right:
            if left == i:
                left += 1
                continue
            if right == i:
                right -= 1
                continue
            pair = data[left] + data[right]
            if pair == wanted:
                good += 1
                break
            if pair < wanted:
                left += 1
            else:
                right -= 1
    return good


def _take(tokens, count):
    if count < 0:
        raise ValueError("count must not be negative")
    taken = [int(next(tokens)) for _ in range(count)] if count else []
    return taken


def _read(tokens, count):
    try:
        return _take(tokens, count)
    except StopIteration:
        raise ValueError("not enough numbers in the input") from None


def _solve_1377(tokens):
    (size,) = _read(tokens, 1)
    return bubble_sort_passes(_read(tokens, size))


def _solve_2003(tokens):
    size, target = _read(tokens, 2)
    return count_subarrays_with_sum(_read(tokens, size), target)


def _solve_1253(tokens):
    (size,) = _read(tokens, 1)
    return count_good_numbers(_read(tokens, size))


_SOLVERS = {
    "1253": _solve_1253,
    "1377": _solve_1377,
    "2003": _solve_2003,
}


def main(argv=None) -> int:
    """Solve the named problem for the numbers on standard input."""
    parser = argparse.ArgumentParser(
        prog="dsalgo-problems",
        description="Solve a counting problem for numbers read from standard input.",
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS), help="problem number")
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        answer = _SOLVERS[args.problem](tokens)
    except ValueError as exc:
        parser.error(str(exc))
    print(answer)
    return 0