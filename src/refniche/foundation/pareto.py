"""
Pareto utilities built on :func:`refniche.foundation.vector.dominance`.

Larger objective values are better throughout, and components are ordered
with :func:`refniche.foundation.vector.compare` (NaN above every number,
``0.0`` above ``-0.0``).
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Literal, overload

import numpy as np
from numpy.typing import ArrayLike

from .exceptions import DimensionMismatchError
from .solutions import Solutions
from .vector import compare, dominance

__all__ = ["rank", "front", "crowding_distance"]


def _matrix(values: Solutions | ArrayLike) -> np.ndarray:
    if isinstance(values, Solutions):
        return values.values
    F = np.asarray(values, dtype=np.float64)
    if F.size == 0 and F.ndim == 1:
        return F.reshape(0, 0)
    if F.ndim != 2:
        raise DimensionMismatchError(f"Objective values must be a 2D array, got shape {F.shape}.")
    return F


def rank(values: Solutions | ArrayLike) -> np.ndarray:
    """
    Non-domination rank of every point (fast non-dominated sort).

    Points no other point dominates get rank 0, points only dominated by
    rank-0 points get rank 1, and so on.

    Args:
        values: Objective values (n_points, n_objectives).

    Returns:
        Integer array of length n_points.
    """
    rows = _matrix(values).tolist()
    n = len(rows)
    relation = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            relation[i][j] = dominance(rows[i], rows[j])
            relation[j][i] = -relation[i][j]

    dominated_by: list[list[int]] = []
    counts = [0] * n
    current: list[int] = []
    for p in range(n):
        beaten = []
        count = 0
        for q in range(n):
            if p == q:
                continue
            if relation[p][q] > 0:
                beaten.append(q)
            elif relation[q][p] > 0:
                count += 1
        if count == 0:
            current.append(p)
        dominated_by.append(beaten)
        counts[p] = count

    ranks = np.zeros(n, dtype=int)
    level = 0
    while current:
        following = []
        for p in current:
            ranks[p] = level
            for q in dominated_by[p]:
                counts[q] -= 1
                if counts[q] == 0:
                    following.append(q)
        level += 1
        current = following
    return ranks


@overload
def front(values: Solutions | ArrayLike, *, return_indices: Literal[False] = False) -> np.ndarray: ...


@overload
def front(values: Solutions | ArrayLike, *, return_indices: Literal[True]) -> tuple[np.ndarray, np.ndarray]: ...


def front(values: Solutions | ArrayLike, *, return_indices: bool = False) -> np.ndarray | tuple[np.ndarray, np.ndarray]:
    """
    Return the non-dominated points.

    Dominated points are swapped to the tail of a working copy as they are
    found, so the front is not in input order. Duplicates of a
    non-dominated point are all kept.

    Args:
        values: Objective values (n_points, n_objectives).
        return_indices: When True, also return the indices of the front
            points in ``values``.

    Returns:
        Front array, or (front, indices) when return_indices is True.
    """
    F = _matrix(values)
    rows = F.tolist()
    order = list(range(len(rows)))
    n = len(order)
    i = 0
    while i < n:
        j = i + 1
        while j < n:
            if dominance(rows[order[i]], rows[order[j]]) > 0:
                n -= 1
                order[j], order[n] = order[n], order[j]
            elif dominance(rows[order[j]], rows[order[i]]) > 0:
                n -= 1
                order[i], order[n] = order[n], order[i]
                i -= 1
                break
            else:
                j += 1
        i += 1

    idx = np.asarray(order[:n], dtype=int)
    points = F[idx]
    return (points, idx) if return_indices else points


def crowding_distance(values: Solutions | ArrayLike) -> np.ndarray:
    """
    Crowding distance of every point.

    With fewer than three points every distance is infinite. Otherwise, per
    objective, the points are sorted by descending value (stable), both
    ends get an infinite distance and every inner point adds the normalized
    gap between its two neighbours. Objectives with no positive spread add
    nothing.
    """
    rows = _matrix(values).tolist()
    n = len(rows)
    result = np.zeros(n, dtype=np.float64)
    if n < 3:
        result[:] = np.inf
        return result

    for m in range(len(rows[0])):
        column = [row[m] for row in rows]
        idx = sorted(range(n), key=cmp_to_key(lambda a, b: compare(column[b], column[a])))
        result[idx[0]] = np.inf
        result[idx[-1]] = np.inf

        spread = column[idx[0]] - column[idx[-1]]
        if compare(spread, 0.0) > 0:
            for i in range(1, n - 1):
                result[idx[i]] += (column[idx[i - 1]] - column[idx[i + 1]]) / spread
    return result
