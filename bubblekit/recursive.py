"""Order selection by a recursive bubbling walk, plus a randomised self-check."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Sequence

from bubblekit.iterative import _read_array, format_listing

DEFAULT_POOL: tuple[int, ...] = (1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8, 9, 9)

Failure = tuple[int, list[int], list[int], list[int]]


def _step(
    arr: Sequence[int], phase: int, bubble: int, trav: int, ref: int, prev: int | None
) -> tuple[int, int]:
    """Return the next (bubble, trav) pair of one walk within a phase."""
    cand = arr[trav + 1]
    left = arr[bubble - 1]
    if cand < left:
        if phase == 0:
            return bubble - 1, trav
        if cand >= prev:
            if ref != trav + 1:
                return bubble - 1, trav
            if left > prev:
                return bubble - 1, bubble - 2
            return bubble - 1, trav
        if left >= prev:
            return (bubble, trav - 1) if ref == bubble - 1 else (bubble - 1, bubble - 2)
        return bubble, trav - 1
    if phase != 0 and trav != bubble - 2:
        if left <= arr[ref]:
            if left == arr[ref]:
                if left >= prev:
                    return (bubble - 1, trav) if ref >= bubble - 1 else (bubble - 1, bubble - 2)
                return bubble - 1, trav
            if cand >= prev:
                return bubble - 1, trav
            return bubble, trav - 1
        if left >= prev:
            return (bubble - 1, trav) if ref == bubble - 1 else (bubble - 1, bubble - 2)
        if cand >= prev:
            return (bubble, trav - 1) if ref == trav + 1 else (bubble - 1, trav)
        return bubble, trav - 1
    return (bubble - 1, trav) if trav == bubble - 2 else (bubble - 1, bubble - 2)


def recursive_bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order without touching the input.

    Each phase walks a pair of cursors from the right end of the data to pick
    the next element, using the previous pick and its position to settle ties.
    """
    arr = list(values)
    size = len(arr)
    order = list(range(size))
    ref = -1
    for phase in range(size):
        prev = arr[order[phase - 1]] if phase else None
        bubble, trav = size - 1, size - 2
        while bubble > 0:
            if trav <= -1:
                order[phase] = trav + 1
                return [arr[i] for i in order]
            bubble, trav = _step(arr, phase, bubble, trav, ref, prev)
        order[phase] = trav + 1
        ref = trav + 1
    return [arr[i] for i in order]


def sample_check(
    samples: int = 5000,
    size: int = 5,
    pool: Sequence[int] = DEFAULT_POOL,
    rng: random.Random | None = None,
) -> tuple[int, list[Failure]]:
    """Sort random draws from ``pool`` and compare each with ``sorted``.

    Returns the number of passing samples and, for each failing one, its
    1-based number, the input, the output and the expected result.
    """
    if samples < 0:
        raise ValueError(f"samples must not be negative: {samples}")
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size and not pool:
        raise ValueError("pool must not be empty")
    rng = rng if rng is not None else random.Random()
    passed = 0
    failures: list[Failure] = []
    for number in range(1, samples + 1):
        data = [rng.choice(pool) for _ in range(size)]
        result = recursive_bubble_sort(data)
        expected = sorted(data)
        if result == expected:
            passed += 1
        else:
            failures.append((number, data, result, expected))
    return passed, failures


def _list_text(values: Iterable[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def main(argv: list[str] | None = None) -> int:
    """Sort an array read from standard input, or run the random self-check."""
    parser = argparse.ArgumentParser(
        prog="bubblekit-recursive",
        description="Sort integers with the recursive walk, or check it on random samples.",
    )
    parser.add_argument("--check", action="store_true", help="run the random self-check")
    parser.add_argument("--samples", type=int, default=5000)
    parser.add_argument("--size", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.check:
        try:
            passed, failures = sample_check(
                args.samples, args.size, DEFAULT_POOL, random.Random(args.seed)
            )
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        for number, data, result, expected in failures:
            print(f"❌ Test {number} failed")
            print(f"Input:   {_list_text(data)}")
            print(f"Output:  {_list_text(result)}")
            print(f"Expected:{_list_text(expected)}\n")
        print(f"\n✅ Passed {passed} / {args.samples} test cases.")
        return 0 if not failures else 1

    try:
        values = _read_array(sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    listing = format_listing(recursive_bubble_sort(values))
    if listing:
        print(listing)
    return 0


if __name__ == "__main__":
    sys.exit(main())