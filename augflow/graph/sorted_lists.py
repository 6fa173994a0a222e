"""Merge-based set operations on strictly increasing integer sequences.

Every function accepts sequences that are sorted in ascending order without
duplicates and returns a new list with the same property. Each operation is a
single linear merge, so the cost is proportional to the sum of input lengths.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence


def normalize(items: Iterable[int]) -> List[int]:
    """Return ``items`` sorted ascending with duplicates removed."""
    return sorted(set(items))


def is_normalized(items: Sequence[int]) -> bool:
    """Return True if ``items`` is strictly increasing."""
    return all(a < b for a, b in zip(items, items[1:]))


def union(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Merge two sorted sequences, keeping each value once."""
    result: List[int] = []
    i, j = 0, 0
    n_left, n_right = len(left), len(right)
    while i < n_left and j < n_right:
        a, b = left[i], right[j]
        if a < b:
            result.append(a)
            i += 1
        elif b < a:
            result.append(b)
            j += 1
        else:
            result.append(a)
            i += 1
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def difference(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Values of ``left`` that are not in ``right``."""
    result: List[int] = []
    i, j = 0, 0
    n_left, n_right = len(left), len(right)
    while i < n_left and j < n_right:
        a, b = left[i], right[j]
        if a < b:
            result.append(a)
            i += 1
        elif b < a:
            j += 1
        else:
            i += 1
            j += 1
    result.extend(left[i:])
    return result


def intersection(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Values present in both sequences."""
    result: List[int] = []
    i, j = 0, 0
    n_left, n_right = len(left), len(right)
    while i < n_left and j < n_right:
        a, b = left[i], right[j]
        if a < b:
            i += 1
        elif b < a:
            j += 1
        else:
            result.append(a)
            i += 1
            j += 1
    return result


def symmetric_difference(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Values present in exactly one of the two sequences."""
    result: List[int] = []
    i, j = 0, 0
    n_left, n_right = len(left), len(right)
    while i < n_left and j < n_right:
        a, b = left[i], right[j]
        if a < b:
            result.append(a)
            i += 1
        elif b < a:
            result.append(b)
            j += 1
        else:
            i += 1
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result
