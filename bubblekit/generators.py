"""Builders for the integer arrays used by the extended test suites."""

from __future__ import annotations

import random


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_array(
    size: int, low: int, high: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``size`` values drawn uniformly from ``low`` to ``high`` inclusive."""
    _check_size(size)
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    rng = _rng(rng)
    return [rng.randint(low, high) for _ in range(size)]


def sorted_array(size: int, start: int, step: int) -> list[int]:
    """Return ``start, start + step, ...`` with ``size`` terms."""
    _check_size(size)
    return [start + i * step for i in range(size)]


def reverse_sorted_array(size: int, start: int, step: int) -> list[int]:
    """Return ``start, start - step, ...`` with ``size`` terms."""
    _check_size(size)
    return [start - i * step for i in range(size)]


def all_same_array(size: int, value: int) -> list[int]:
    """Return ``size`` copies of ``value``."""
    _check_size(size)
    return [value] * size


def duplicates_array(
    size: int, distinct_count: int, rng: random.Random | None = None
) -> list[int]:
    """Pick ``distinct_count`` values below 100, then fill ``size`` slots from them."""
    _check_size(size)
    if distinct_count <= 0:
        raise ValueError(f"distinct_count must be positive: {distinct_count}")
    rng = _rng(rng)
    choices = [rng.randrange(100) for _ in range(distinct_count)]
    return [rng.choice(choices) for _ in range(size)]


def nearly_sorted_array(
    size: int, swap_count: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``0 .. size-1`` after ``swap_count`` random pair swaps."""
    _check_size(size)
    if swap_count < 0:
        raise ValueError(f"swap_count must not be negative: {swap_count}")
    if swap_count and not size:
        raise ValueError("cannot swap elements of an empty array")
    rng = _rng(rng)
    values = sorted_array(size, 0, 1)
    for _ in range(swap_count):
        a = rng.randrange(size)
        b = rng.randrange(size)
        values[a], values[b] = values[b], values[a]
    return values


def mountain_array(size: int) -> list[int]:
    """Rise from 0 to a peak at ``size // 2``, then fall back towards 0."""
    _check_size(size)
    mid = size // 2
    return [i if i <= mid else size - i - 1 for i in range(size)]


def valley_array(size: int) -> list[int]:
    """Fall to 0 at ``size // 2``, then rise again."""
    _check_size(size)
    mid = size // 2
    return [mid - i if i <= mid else i - mid for i in range(size)]


def alternating_array(size: int, low: int, high: int) -> list[int]:
    """Return ``low, high, low, ...`` with ``size`` terms."""
    _check_size(size)
    return [low if i % 2 == 0 else high for i in range(size)]


def arithmetic_array(size: int, start: int, step: int) -> list[int]:
    """Return an arithmetic progression; the same as :func:`sorted_array`."""
    return sorted_array(size, start, step)


def geometric_array(size: int, start: int, factor: int) -> list[int]:
    """Return ``start, start * factor, ...`` with ``size`` terms."""
    _check_size(size)
    return [start * factor**i for i in range(size)]


def permutation(size: int, rng: random.Random | None = None) -> list[int]:
    """Return a random ordering of ``0 .. size-1``."""
    _check_size(size)
    values = list(range(size))
    _rng(rng).shuffle(values)
    return values


def almost_constant_array(
    size: int, constant: int, different_index: int, different_value: int
) -> list[int]:
    """Return ``size`` copies of ``constant`` with one slot set to ``different_value``."""
    _check_size(size)
    if not 0 <= different_index < size:
        raise IndexError(f"index {different_index} out of range for size {size}")
    values = [constant] * size
    values[different_index] = different_value
    return values