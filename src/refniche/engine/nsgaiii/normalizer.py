"""NSGA-III objective normalization.

This module provides the normalization step of NSGA-III environmental
selection:
- Ideal point and translation
- Extreme points via the Chebyshev ASF (Achievement Scalarization Function)
- Hyperplane intercepts with a nadir-based fallback for degenerate cases
- In-place rescaling of the translated objectives

References:
    R. H. Bhesdadiya, I. N. Trivedi, P. Jangir, N. Jangir and A. Kumar,
    "An NSGA-III algorithm for solving multi-objective economic/environmental
    dispatch problem," Cogent Engineering, 3:1, 2016.
"""

from __future__ import annotations

import logging

import numpy as np

from refniche.foundation.exceptions import SingularMatrixError
from refniche.foundation.finding import argmin
from refniche.foundation.solutions import Solutions
from .config import NormalizerConfig, NormalizerConfigData
from .linalg import solve

__all__ = [
    "ideal_point",
    "translate",
    "asf",
    "extreme_points",
    "compute_intercepts",
    "rescale",
    "Normalizer",
    "normalize",
]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def ideal_point(values: np.ndarray, mode: str = "max") -> np.ndarray:
    """Running per-objective extreme of ``values``, seeded at +inf.

    The default ``"max"`` mode keeps the running maximum from the +inf seed,
    so any non-empty population yields +inf (or NaN) in every objective.
    ``"min"`` keeps the running minimum.
    """
    update = np.maximum if mode == "max" else np.minimum
    point = np.full(values.shape[1], np.inf)
    for row in values:
        point = update(point, row)
    return point


def translate(values: np.ndarray, ideal: np.ndarray) -> np.ndarray:
    """Return a new array with ``ideal`` subtracted from every row."""
    with np.errstate(invalid="ignore", over="ignore"):
        return values - ideal


def asf(values: np.ndarray, weights: np.ndarray) -> np.ndarray:
    """Chebyshev achievement scalarizing function ``max_k(v[k] / w[k])`` per row."""
    with np.errstate(invalid="ignore", over="ignore"):
        return np.max(values / weights, axis=1)


def extreme_points(translated: np.ndarray, asf_epsilon: float = 1e-6) -> np.ndarray:
    """Return the extreme point of every objective, shape (n_obj, n_obj).

    Row ``j`` is the translated solution minimizing the ASF with weight 1 on
    objective ``j`` and ``asf_epsilon`` elsewhere; ties go to the first row.
    """
    n_obj = translated.shape[1]
    extremes = np.empty((n_obj, n_obj), dtype=np.float64)
    for j in range(n_obj):
        weights = np.full(n_obj, asf_epsilon)
        weights[j] = 1.0
        scores = asf(translated, weights).tolist()
        extremes[j] = translated[argmin(0, len(scores), scores.__getitem__)]
    return extremes


def compute_intercepts(
    values: np.ndarray,
    extremes: np.ndarray,
    *,
    eps: float = 1e-10,
    min_intercept: float = 1e-3,
) -> tuple[np.ndarray, bool]:
    """Compute the intercepts of the extreme-point hyperplane with each axis.

    Degenerate cases (singular system or any intercept below
    ``min_intercept``) replace the whole intercept vector with the per-axis
    maximum of the untranslated ``values``, floored at ``eps``.

    Parameters
    ----------
    values : np.ndarray
        Objective values before translation, shape (n, n_obj). Only read
        when the fallback is taken.
    extremes : np.ndarray
        Extreme points, shape (n_obj, n_obj).
    eps : float
        Singularity threshold and floor of the fallback intercepts.
    min_intercept : float
        Smallest accepted solved intercept.

    Returns
    -------
    tuple
        (intercepts, degenerate) where degenerate tells whether the fallback
        was used.
    """
    n_obj = values.shape[1]
    degenerate = False
    intercepts = np.zeros(n_obj, dtype=np.float64)
    try:
        plane = solve(extremes, np.ones(n_obj), eps=eps)
        with np.errstate(divide="ignore", invalid="ignore"):
            intercepts = 1.0 / plane
    except SingularMatrixError as exc:
        _logger().debug("Extreme points are degenerate: %s", exc.message)
        degenerate = True

    with np.errstate(invalid="ignore"):
        too_small = bool(np.any(intercepts < min_intercept))
    if not degenerate and too_small:
        _logger().debug("Intercepts %s fall below %g", intercepts, min_intercept)
        degenerate = True

    if degenerate:
        intercepts = np.maximum(eps, values.max(axis=0))
        _logger().debug("Using nadir-based intercepts %s", intercepts)

    return intercepts, degenerate


def rescale(values: np.ndarray, intercepts: np.ndarray) -> np.ndarray:
    """Divide every row of ``values`` by ``intercepts`` in place and return it."""
    with np.errstate(divide="ignore", invalid="ignore"):
        values /= intercepts
    return values


class Normalizer:
    """Normalization step of NSGA-III environmental selection.

    Parameters
    ----------
    config : NormalizerConfigData, optional
        Numeric thresholds and ideal point mode. Defaults to
        ``NormalizerConfig.default()``.

    Examples
    --------
    >>> normalizer = Normalizer()
    >>> normalized = normalizer.normalize(Solutions(F))
    >>> normalizer.intercepts, normalizer.degenerate
    """

    def __init__(self, config: NormalizerConfigData | None = None) -> None:
        self.cfg = config if config is not None else NormalizerConfig.default()
        self.intercepts: np.ndarray | None = None
        self.degenerate: bool = False

    def normalize(self, solutions: Solutions) -> Solutions:
        """Translate and rescale ``solutions``.

        The input handle is consumed; the returned ``Solutions`` owns the
        normalized values and is the only handle to use afterwards.
        """
        F = solutions._array()
        if F.shape[0] == 0:
            solutions._take()
            self.intercepts = np.ones(F.shape[1], dtype=np.float64)
            self.degenerate = False
            return Solutions._adopt(F.copy())

        ideal = ideal_point(F, self.cfg.ideal_point)
        if not np.all(np.isfinite(ideal)):
            _logger().debug("Ideal point %s is not finite", ideal)
        translated = translate(F, ideal)

        extremes = extreme_points(translated, self.cfg.asf_epsilon)
        intercepts, degenerate = compute_intercepts(
            F,
            extremes,
            eps=self.cfg.eps,
            min_intercept=self.cfg.min_intercept,
        )
        # The input is only released once nothing else can fail.
        solutions._take()
        self.intercepts = intercepts
        self.degenerate = degenerate
        return Solutions._adopt(rescale(translated, intercepts))


def normalize(solutions: Solutions, config: NormalizerConfigData | None = None) -> Solutions:
    """Shortcut for ``Normalizer(config).normalize(solutions)``."""
    return Normalizer(config).normalize(solutions)
