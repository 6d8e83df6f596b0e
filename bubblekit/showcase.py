"""Small demonstration of the recursive sort with labelled before/after output."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from bubblekit.iterative import format_listing
from bubblekit.recursive import recursive_bubble_sort

DEFAULT_VALUES: tuple[int, ...] = (42,)


def format_labelled(values: Iterable[int], label: str) -> str:
    """Render values as ``label: { a b c }``."""
    body = "".join(f"{value} " for value in values)
    return f"{label}: {{ {body}}}"


def run_demo(values: Iterable[int], out: TextIO) -> list[int]:
    """Write the input and its sorted form to ``out``; return the sorted values."""
    data = list(values)
    out.write(format_labelled(data, "Input") + "\n")
    result = recursive_bubble_sort(data)
    out.write(format_labelled(result, "Sorted") + "\n")
    return result


def main(argv: list[str] | None = None) -> int:
    """Sort the given integers (42 by default) and print them."""
    parser = argparse.ArgumentParser(
        prog="bubblekit-showcase",
        description="Sort a few integers with the recursive walk and show the result.",
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    parser.add_argument(
        "--labelled", action="store_true", help="show labelled input and output lines"
    )
    args = parser.parse_args(argv)
    values = args.values if args.values else list(DEFAULT_VALUES)
    if args.labelled:
        run_demo(values, sys.stdout)
    else:
        listing = format_listing(recursive_bubble_sort(values))
        if listing:
            print(listing)
    return 0


if __name__ == "__main__":
    sys.exit(main())