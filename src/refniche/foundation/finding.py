from __future__ import annotations

from typing import Callable

__all__ = ["argmin"]


def argmin(start: int, end: int, key: Callable[[int], float]) -> int:
    """
    Return the index in ``[start, end)`` with the smallest ``key`` value.

    Single pass with a strict ``<`` comparison: the first minimal index wins
    ties, and a NaN key never replaces the current best. Returns ``-1`` for an
    empty range.
    """
    if start >= end:
        return -1
    best = start
    best_value = key(start)
    for index in range(start + 1, end):
        value = key(index)
        if value < best_value:
            best = index
            best_value = value
    return best
