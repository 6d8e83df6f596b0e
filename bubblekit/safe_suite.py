"""Safe bubble sort suite: small fixed cases, random families and extreme values."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable

from bubblekit.harness import (
    BOLD,
    CLEAR_SCREEN,
    CYAN,
    RESET,
    SORTERS,
    SortCase,
    run_suite,
)

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

TITLE = "BUBBLE SORT TEST SUITE (Safe Test Set)"
TITLE_RULE = "=" * 52


def _mixed_extreme(rng: random.Random) -> int:
    pick = rng.randrange(5)
    if pick == 0:
        return INT_MIN
    if pick == 1:
        return INT_MAX
    if pick == 2:
        return 0
    return rng.randrange(200) - 100


def safe_cases(rng: random.Random | None = None) -> list[SortCase]:
    """Build the safe set: fixed small cases, random families and extreme values."""
    rng = rng if rng is not None else random.Random()
    cases = [
        SortCase("Single element: [5]", (5,)),
        SortCase("Two elements ascending: [1,2]", (1, 2)),
        SortCase("Two elements descending: [2,1]", (2, 1)),
        SortCase("Three elements sorted: [1,2,3]", (1, 2, 3)),
        SortCase("Three elements reverse: [3,2,1]", (3, 2, 1)),
        SortCase("Three elements middle out: [1,3,2]", (1, 3, 2)),
        SortCase("Three elements all same: [7,7,7]", (7, 7, 7)),
        SortCase("Sorted array (size 10)", tuple(range(1, 11))),
        SortCase("Reverse sorted array (size 10)", tuple(range(10, 0, -1))),
    ]

    def family(
        title: str, count: int, low: int, high: int, build: Callable[[int], list[int]]
    ) -> None:
        for number in range(1, count + 1):
            size = rng.randint(low, high)
            cases.append(SortCase(f"{title} {number} (size {size})", build(size)))

    family("Random array", 30, 5, 14, lambda n: [rng.randrange(100) - 50 for _ in range(n)])

    def duplicates(n: int) -> list[int]:
        base = rng.randrange(20) - 10
        return [base + rng.randrange(3) for _ in range(n)]

    family("Duplicates array", 20, 4, 11, duplicates)

    cases += [
        SortCase("INT_MAX, 0, INT_MIN, 1, -1", (INT_MAX, 0, INT_MIN, 1, -1)),
        SortCase("INT_MIN, INT_MAX, 5, -5, 0", (INT_MIN, INT_MAX, 5, -5, 0)),
    ]

    family("Mixed extreme values", 8, 4, 7, lambda n: [_mixed_extreme(rng) for _ in range(n)])

    def partially_sorted(n: int) -> list[int]:
        half = n // 2
        return [j * 2 for j in range(half)] + [rng.randrange(n * 2) for _ in range(n - half)]

    family("Partially sorted", 5, 6, 10, partially_sorted)

    def nearly_sorted(n: int) -> list[int]:
        values = list(range(n))
        first, second = rng.sample(range(n), 2)
        values[first], values[second] = values[second], values[first]
        return values

    family("Nearly sorted (one swap)", 5, 6, 10, nearly_sorted)
    return cases


def main(argv: list[str] | None = None) -> int:
    """Run the safe suite against one of the sorters."""
    parser = argparse.ArgumentParser(
        prog="bubblekit-safe",
        description="Run the safe bubble sort test suite.",
    )
    parser.add_argument("--sorter", choices=sorted(SORTERS), default="recursive")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write(CLEAR_SCREEN)
    out.write(f"{BOLD}{CYAN}{TITLE}{RESET}\n")
    out.write(f"{TITLE_RULE}\n\n")
    cases = safe_cases(random.Random(args.seed))
    passed = run_suite(cases, SORTERS[args.sorter], out)
    return 0 if passed == len(cases) else 1


if __name__ == "__main__":
    sys.exit(main())