"""Reference point association for NSGA-III.

Every normalized solution is attached to the reference direction whose line
through the origin is closest in perpendicular distance.
"""

from __future__ import annotations

import logging

import numpy as np

from refniche.foundation.exceptions import DimensionMismatchError
from refniche.foundation.finding import argmin
from refniche.foundation.solutions import Solutions, Weights
from refniche.foundation.vector import distance

__all__ = ["Associate", "associate"]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class Associate:
    """Assign solutions to their nearest reference line.

    Parameters
    ----------
    weights : Weights
        Reference directions; the row index identifies the reference point.
    """

    def __init__(self, weights: Weights) -> None:
        self.weights = weights
        self._lines = [w.tolist() for w in weights]

    def _check(self, solutions: Solutions) -> None:
        if solutions.objectives != self.weights.objectives:
            raise DimensionMismatchError(
                f"Solutions have {solutions.objectives} objectives but reference "
                f"directions have {self.weights.objectives}.",
                expected=self.weights.objectives,
                actual=solutions.objectives,
            )

    def assign(self, solutions: Solutions) -> tuple[np.ndarray, np.ndarray]:
        """Associate solutions with reference directions.

        Parameters
        ----------
        solutions : Solutions
            Normalized objective values, shape (n, n_obj).

        Returns
        -------
        tuple
            (associations, distances) where associations are reference
            indices and distances the perpendicular distances to them.
        """
        self._check(solutions)
        lines = self._lines
        n = len(solutions)
        associations = np.empty(n, dtype=int)
        distances = np.empty(n, dtype=np.float64)
        for k, point in enumerate(solutions.values.tolist()):
            dist = [distance(line, point) for line in lines]
            best = argmin(0, len(dist), dist.__getitem__)
            associations[k] = best
            distances[k] = dist[best]
        if n and not np.all(np.isfinite(distances)):
            _logger().debug("%d of %d association distances are not finite", int(np.sum(~np.isfinite(distances))), n)
        return associations, distances

    def associate(self, solutions: Solutions) -> list[list[np.ndarray]]:
        """Partition ``solutions`` into one bucket per reference direction.

        Returns
        -------
        list
            ``len(weights)`` buckets in index order; bucket ``i`` holds the
            objective vectors associated with reference direction ``i`` and
            may be empty.
        """
        associations, _ = self.assign(solutions)
        buckets: list[list[np.ndarray]] = [[] for _ in range(len(self.weights))]
        for vector, ref in zip(solutions.values, associations.tolist()):
            buckets[ref].append(vector)
        return buckets


def associate(solutions: Solutions, weights: Weights) -> list[list[np.ndarray]]:
    """Shortcut for ``Associate(weights).associate(solutions)``."""
    return Associate(weights).associate(solutions)
