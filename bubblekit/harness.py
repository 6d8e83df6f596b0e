"""Self-checking test harness for the bubble sorts, with coloured terminal output."""

from __future__ import annotations

import argparse
import random
import sys
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from bubblekit.iterative import bubble_sort
from bubblekit.recursive import recursive_bubble_sort

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
BOLD = "\033[1m"

CLEAR_SCREEN = "\033[2J\033[H"
RULE = "================================"

Sorter = Callable[[list[int]], Sequence[int]]

_BUBBLE_BANNER = (
    "    ██████  ██    ██ ██████  ██████  ██      ███████ \n"
    "    ██   ██ ██    ██ ██   ██ ██   ██ ██      ██      \n"
    "    ██████  ██    ██ ██████  ██████  ██      █████   \n"
    "    ██   ██ ██    ██ ██   ██ ██   ██ ██      ██      \n"
    "    ██████   ██████  ██████  ██████  ███████ ███████ \n"
)

_SORT_BANNER = (
    "    ███████  ██████  ██████  ████████ \n"
    "    ██      ██    ██ ██   ██    ██    \n"
    "    ███████ ██    ██ ██████     ██    \n"
    "         ██ ██    ██ ██   ██    ██    \n"
    "    ███████  ██████  ██   ██    ██    \n"
)

SORTERS: dict[str, Sorter] = {
    "recursive": recursive_bubble_sort,
    "iterative": bubble_sort,
}


@dataclass(frozen=True)
class SortCase:
    """A named input for a sorter."""

    name: str
    values: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


def is_sorted(values: Sequence[int]) -> bool:
    """Return True when every element is no greater than the next."""
    return all(a <= b for a, b in zip(values, values[1:]))


def same_elements(original: Iterable[int], result: Iterable[int]) -> bool:
    """Return True when both hold the same values with the same multiplicities."""
    return Counter(original) == Counter(result)


def run_case(case: SortCase, sorter: Sorter) -> bool:
    """Sort a copy of the case's values and check order and contents."""
    result = list(sorter(list(case.values)))
    return is_sorted(result) and same_elements(case.values, result)


def format_result(name: str, passed: bool) -> str:
    """Render one result line with a coloured dot."""
    if passed:
        return f"{GREEN}● {BOLD}[PASS]{RESET} {name}"
    return f"{RED}● {BOLD}[FAIL]{RESET} {name}"


def format_summary(passed: int, total: int) -> str:
    """Render the closing block: totals, then a banner or a failure notice."""
    if passed < 0 or total < 0 or passed > total:
        raise ValueError(f"invalid counts: {passed} passed of {total}")
    failed = total - passed
    fail_colour = RED if failed > 0 else GREEN
    fail_bold = BOLD if failed > 0 else ""
    parts = [
        f"\n{CYAN}{RULE}{RESET}\n",
        f"Test Results: {GREEN}● {passed} PASSED{RESET}, "
        f"{fail_colour}● {fail_bold}{failed} FAILED{RESET}\n",
    ]
    if failed == 0:
        parts += [
            f"\n{BOLD}{RED}",
            _BUBBLE_BANNER,
            RESET,
            f"\n{BOLD}{YELLOW}",
            _SORT_BANNER,
            f"{RESET}\n",
            f"{BOLD}{GREEN}🎉 ALL TESTS PASSED! 🎉{RESET}\n",
            f"{BOLD}{YELLOW}🔥 BUBBLE SORT WORKS! 🔥{RESET}\n",
        ]
    else:
        parts.append(
            f"\n{RED}● {BOLD}Some tests failed. Please check your implementation.{RESET}\n"
        )
    return "".join(parts)


def _mountain(size: int) -> list[int]:
    mid = size // 2
    return [j if j < mid else size - j - 1 for j in range(size)]


def standard_cases(rng: random.Random | None = None) -> list[SortCase]:
    """Build the 99 standard cases: fixed edge cases, random families and special patterns."""
    rng = rng if rng is not None else random.Random()
    cases = [
        SortCase("Single element", (5,)),
        SortCase("Two elements ascending", (1, 2)),
        SortCase("Two elements descending", (2, 1)),
        SortCase("Already sorted array", tuple(range(1, 6))),
        SortCase("Reverse sorted array", tuple(range(5, 0, -1))),
    ]

    def family(title: str, low: int, high: int, build: Callable[[int], list[int]]) -> None:
        for number in range(1, 11):
            size = rng.randint(low, high)
            cases.append(SortCase(f"{title} {number} (size {size})", build(size)))

    family("Random array", 3, 10, lambda n: [rng.randrange(100) for _ in range(n)])

    def duplicates(n: int) -> list[int]:
        base = rng.randrange(10)
        return [base + rng.randrange(3) for _ in range(n)]

    family("Duplicates array", 4, 9, duplicates)

    def all_same(n: int) -> list[int]:
        return [rng.randrange(50)] * n

    family("All same elements", 3, 9, all_same)
    family("Negative numbers", 4, 9, lambda n: [rng.randrange(100) - 50 for _ in range(n)])
    family("Large numbers", 3, 7, lambda n: [rng.randrange(10000) + 1000 for _ in range(n)])
    family("Around zero", 3, 7, lambda n: [rng.randrange(3) - 1 for _ in range(n)])

    def partially_sorted(n: int) -> list[int]:
        half = n // 2
        return list(range(half)) + [rng.randrange(100) for _ in range(n - half)]

    family("Partially sorted", 5, 10, partially_sorted)

    def nearly_sorted(n: int) -> list[int]:
        values = [j * 2 for j in range(n)]
        if n >= 2:
            values[0], values[1] = values[1], values[0]
        return values

    family("Nearly sorted", 4, 8, nearly_sorted)
    family("Mountain array", 5, 9, _mountain)

    cases += [
        SortCase("Fibonacci sequence", (8, 5, 13, 3, 21, 2, 1, 1)),
        SortCase("Powers of 2", (64, 1, 16, 4, 32, 2, 8)),
        SortCase("Alternating pattern", (1, 10, 2, 9, 3, 8, 4, 7, 5, 6)),
        SortCase("Three elements reverse", (3, 2, 1)),
    ]
    return cases


def run_suite(cases: Iterable[SortCase], sorter: Sorter, out: TextIO) -> int:
    """Run every case, write results and a summary to ``out``; return the pass count."""
    cases = list(cases)
    out.write(f"Running {len(cases)} test cases...\n\n")
    passed = 0
    for case in cases:
        ok = run_case(case, sorter)
        out.write(format_result(case.name, ok) + "\n")
        passed += ok
    out.write(format_summary(passed, len(cases)))
    return passed


def main(argv: list[str] | None = None) -> int:
    """Run the standard suite against one of the sorters."""
    parser = argparse.ArgumentParser(
        prog="bubblekit-harness",
        description="Run the standard bubble sort test suite.",
    )
    parser.add_argument("--sorter", choices=sorted(SORTERS), default="recursive")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write(CLEAR_SCREEN)
    out.write(f"{BOLD}{CYAN}BUBBLE SORT TEST SUITE{RESET}\n")
    out.write(f"{RULE}\n\n")
    cases = standard_cases(random.Random(args.seed))
    passed = run_suite(cases, SORTERS[args.sorter], out)
    return 0 if passed == len(cases) else 1


if __name__ == "__main__":
    sys.exit(main())