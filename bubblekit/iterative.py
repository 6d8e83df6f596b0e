"""Optimised in-place bubble sort and an interactive command around it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, MutableSequence
from typing import TextIO, TypeVar

T = TypeVar("T")


def bubble_sort(values: MutableSequence[T]) -> MutableSequence[T]:
    """Sort ``values`` in place in ascending order and return the same object.

    A pass that makes no swap ends the sort early.
    """
    size = len(values)
    for phase in range(size - 1):
        swapped = False
        for i in range(size - 1 - phase):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        if not swapped:
            break
    return values


def format_listing(values: Iterable[int]) -> str:
    """Render values as ``array[i] :- v`` lines joined by newlines."""
    return "\n".join(f"array[{index}] :- {value}" for index, value in enumerate(values))


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_array(stream: TextIO, out: TextIO) -> list[int]:
    """Prompt for a size and that many integers, reading whitespace-separated tokens."""
    tokens = _tokens(stream)

    def next_int() -> int:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None

    out.write("Enter the size of array :- ")
    out.flush()
    size = next_int()
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    out.write("\n")
    values = []
    for index in range(size):
        out.write(f"Enter array[{index}] :- ")
        out.flush()
        values.append(next_int())
    return values


def main(argv: list[str] | None = None) -> int:
    """Read an array from standard input, sort it and print it."""
    parser = argparse.ArgumentParser(
        prog="bubblekit-sort",
        description="Read integers from standard input and print them bubble sorted.",
    )
    parser.parse_args(argv)
    try:
        values = _read_array(sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    bubble_sort(values)
    print()
    listing = format_listing(values)
    if listing:
        print(listing)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())