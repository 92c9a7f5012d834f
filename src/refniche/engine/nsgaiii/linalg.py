"""Dense linear solver for the NSGA-III hyperplane intercepts.

Only small square systems (one row per objective) are expected, so the
elimination runs on plain Python floats where every update is a fused
multiply-add.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from refniche.foundation.exceptions import DimensionMismatchError, SingularMatrixError
from refniche.foundation.vector import fma

EPS = 1e-10

__all__ = ["EPS", "solve"]


def solve(A: ArrayLike, b: ArrayLike, *, eps: float = EPS) -> np.ndarray:
    """Solve ``A @ x = b`` by Gaussian elimination with partial pivoting.

    Parameters
    ----------
    A : array-like
        Coefficient matrix, shape (n, n). Not modified.
    b : array-like
        Right-hand side, shape (n,). Not modified.
    eps : float
        Pivots with a smaller magnitude mark the matrix as singular.

    Returns
    -------
    np.ndarray
        Solution vector x, shape (n,).

    Raises
    ------
    SingularMatrixError
        If a pivot is (near) zero after row exchange.
    """
    a_arr = np.asarray(A, dtype=np.float64)
    b_arr = np.asarray(b, dtype=np.float64)
    if b_arr.ndim != 1:
        raise DimensionMismatchError(f"Right-hand side must be 1D, got shape {b_arr.shape}.")
    n = int(b_arr.shape[0])
    if a_arr.ndim != 2 or a_arr.shape != (n, n):
        raise DimensionMismatchError(
            f"Expected an {n}x{n} coefficient matrix, got shape {a_arr.shape}.",
            expected=n,
            actual=int(a_arr.shape[0]) if a_arr.ndim else None,
        )

    M = a_arr.tolist()
    y = b_arr.tolist()

    for p in range(n):
        pivot = p
        for i in range(p + 1, n):
            if abs(M[i][p]) > abs(M[pivot][p]):
                pivot = i
        M[p], M[pivot] = M[pivot], M[p]
        y[p], y[pivot] = y[pivot], y[p]

        if abs(M[p][p]) < eps:
            raise SingularMatrixError(p, M[p][p])

        for i in range(p + 1, n):
            alpha = M[i][p] / M[p][p]
            y[i] = -fma(alpha, y[p], -y[i])
            for j in range(p, n):
                M[i][j] = -fma(alpha, M[p][j], -M[i][j])

    x = [0.0] * n
    for i in range(n - 1, -1, -1):
        acc = 0.0
        for j in range(i + 1, n):
            acc = fma(M[i][j], x[j], acc)
        x[i] = (y[i] - acc) / M[i][i]

    return np.asarray(x, dtype=np.float64)
