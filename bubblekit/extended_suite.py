"""Extended bubble sort suite: the standard cases plus about 900 generated ones."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable

from bubblekit.generators import (
    all_same_array,
    almost_constant_array,
    alternating_array,
    arithmetic_array,
    duplicates_array,
    geometric_array,
    mountain_array,
    nearly_sorted_array,
    permutation,
    random_array,
    reverse_sorted_array,
    sorted_array,
    valley_array,
)
from bubblekit.harness import (
    BOLD,
    CLEAR_SCREEN,
    CYAN,
    RESET,
    RULE,
    SORTERS,
    SortCase,
    format_result,
    format_summary,
    run_case,
    standard_cases,
)

_VERY_SMALL_COUNTS: tuple[tuple[int, int], ...] = ((1, 19), (2, 18), (3, 20), (4, 20), (5, 20))
_LARGE_SIZES: tuple[int, ...] = (100, 50, 20, 10)


def _patterns(rng: random.Random) -> list[tuple[str, Callable[[int], list[int]]]]:
    return [
        ("random", lambda n: random_array(n, -1000, 1000, rng)),
        ("sorted", lambda n: sorted_array(n, rng.randrange(1000), rng.randrange(10) + 1)),
        (
            "reverse sorted",
            lambda n: reverse_sorted_array(n, rng.randrange(1000), rng.randrange(10) + 1),
        ),
        ("all same", lambda n: all_same_array(n, rng.randrange(1000))),
        ("duplicates", lambda n: duplicates_array(n, rng.randrange(5) + 1, rng)),
        ("nearly sorted (one swap)", lambda n: nearly_sorted_array(n, 1, rng)),
        ("nearly sorted (5 swaps)", lambda n: nearly_sorted_array(n, 5, rng)),
        ("mountain", mountain_array),
        ("valley", valley_array),
        (
            "alternating",
            lambda n: alternating_array(n, rng.randrange(100), rng.randrange(100) + 100),
        ),
    ]


def extended_cases(rng: random.Random | None = None) -> list[SortCase]:
    """Build the 1000 extended cases, starting with the 99 standard ones."""
    rng = rng if rng is not None else random.Random()
    cases = standard_cases(rng)
    cases.append(SortCase("Size 0 array", ()))

    for size, count in _VERY_SMALL_COUNTS:
        for number in range(1, count + 1):
            cases.append(
                SortCase(
                    f"Very small random {number} (size {size})",
                    random_array(size, -100, 100, rng),
                )
            )

    patterns = _patterns(rng)
    for size in _LARGE_SIZES:
        for pattern_name, build in patterns:
            for number in range(1, 11):
                cases.append(SortCase(f"Size {size} {pattern_name} {number}", build(size)))

    for number in range(1, 101):
        size = rng.randint(5, 50)
        start = rng.randint(-1000, 1000)
        step = rng.randint(-50, 50)
        cases.append(
            SortCase(
                f"Arithmetic {number} (size {size}, start {start}, step {step})",
                arithmetic_array(size, start, step),
            )
        )

    for number in range(1, 101):
        size = rng.randint(5, 10)
        start = rng.randint(-10, 10) or 1
        factor = rng.randint(-2, 2) or 1
        cases.append(
            SortCase(
                f"Geometric {number} (size {size}, start {start}, factor {factor})",
                geometric_array(size, start, factor),
            )
        )

    for number in range(1, 101):
        size = rng.randint(5, 50)
        cases.append(SortCase(f"Permutation {number} (size {size})", permutation(size, rng)))

    for number in range(1, 104):
        size = rng.randint(5, 50)
        constant = rng.randint(-100, 100)
        index = rng.randrange(size)
        different = constant + rng.randint(1, 100)
        cases.append(
            SortCase(
                f"One element different {number} (size {size}, constant {constant}, "
                f"different at {index})",
                almost_constant_array(size, constant, index, different),
            )
        )
    return cases


def main(argv: list[str] | None = None) -> int:
    """Run the extended suite against one of the sorters and report timing."""
    parser = argparse.ArgumentParser(
        prog="bubblekit-extended",
        description="Run the extended bubble sort test suite.",
    )
    parser.add_argument("--sorter", choices=sorted(SORTERS), default="recursive")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    sorter = SORTERS[args.sorter]

    out = sys.stdout
    out.write(CLEAR_SCREEN)
    out.write(f"{BOLD}{CYAN}BUBBLE SORT TEST SUITE{RESET}\n")
    out.write(f"{RULE}\n\n")

    cases = extended_cases(random.Random(args.seed))
    out.write(f"Running {len(cases)} test cases...\n\n")

    passed = 0
    started = time.process_time()
    for case in cases:
        ok = run_case(case, sorter)
        out.write(format_result(case.name, ok) + "\n")
        passed += ok
    elapsed = time.process_time() - started

    blank, rule, results, rest = format_summary(passed, len(cases)).split("\n", 3)
    out.write("\n".join((blank, rule, results)) + "\n")
    out.write(f"Execution Time: {elapsed:.2f} seconds\n")
    out.write(rest)
    return 0 if passed == len(cases) else 1


if __name__ == "__main__":
    sys.exit(main())