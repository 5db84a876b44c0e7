"""Extremes and sorting of sequences of floats."""

from __future__ import annotations

from typing import Callable, Sequence


def _first_extreme(
    values: Sequence[float], better: Callable[[float, float], bool]
) -> tuple[float, int]:
    if not values:
        raise ValueError("sequence is empty")
    best_index = 0
    best = values[0]
    for index, value in enumerate(values):
        if better(value, best):
            best, best_index = value, index
    return best, best_index


def max_value(values: Sequence[float]) -> tuple[float, int]:
    """Return the first largest value and its index."""
    return _first_extreme(values, lambda v, best: v > best)


def max_abs(values: Sequence[float]) -> tuple[float, int]:
    """Return the first value of largest magnitude (with its sign) and its index."""
    return _first_extreme(values, lambda v, best: abs(v) > abs(best))


def min_value(values: Sequence[float]) -> tuple[float, int]:
    """Return the first smallest value and its index."""
    return _first_extreme(values, lambda v, best: v < best)


def min_abs(values: Sequence[float]) -> tuple[float, int]:
    """Return the first value of smallest magnitude (with its sign) and its index."""
    return _first_extreme(values, lambda v, best: abs(v) < abs(best))


def sort_descending(values: Sequence[float]) -> list[float]:
    """Return a new list sorted from largest to smallest."""
    return sorted(values, reverse=True)


def sort_ascending(values: Sequence[float]) -> list[float]:
    """Return a new list sorted from smallest to largest."""
    return sorted(values)


def _merge(left: list[float], right: list[float]) -> list[float]:
    merged: list[float] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(values: list[float]) -> list[float]:
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(_merge_sort(values[:mid]), _merge_sort(values[mid:]))


def merge_sort(values: Sequence[float]) -> list[float]:
    """Return a new ascending list, sorted by merge sort."""
    if not values:
        raise ValueError("sequence is empty")
    return _merge_sort(list(values))