"""Containers for a population's objective vectors and the reference directions.

``Solutions`` owns a 2-D ``float64`` array of shape ``(n, n_obj)`` and hands
out read-only views of it. ``Weights`` is an immutable, non-empty set of
reference directions whose row index is the reference point's identity.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
from numpy.typing import ArrayLike

from .exceptions import (
    DegenerateWeightsError,
    DimensionMismatchError,
    EmptyWeightsError,
    SolutionsConsumedError,
)

__all__ = ["Solutions", "Weights"]


def _readonly(arr: np.ndarray) -> np.ndarray:
    view = arr.view()
    view.setflags(write=False)
    return view


def _as_matrix(values: ArrayLike, n_obj: int | None, what: str) -> np.ndarray:
    arr = np.array(values, dtype=np.float64, copy=True)
    if arr.size == 0 and (arr.ndim == 1 or (arr.ndim == 2 and arr.shape[0] == 0)):
        if n_obj is None:
            if arr.ndim == 2 and arr.shape[1] > 0:
                n_obj = int(arr.shape[1])
            else:
                raise DimensionMismatchError(f"Cannot infer the objective count of empty {what}; pass n_obj.")
        if arr.ndim == 1 or arr.shape[1] == 0:
            arr = arr.reshape(0, n_obj)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"{what} must be a 2D array, got shape {arr.shape}.")
    if arr.shape[1] < 1:
        raise DimensionMismatchError(f"{what} need at least one objective.", actual=int(arr.shape[1]))
    if n_obj is not None and arr.shape[1] != n_obj:
        raise DimensionMismatchError(
            f"{what} have {arr.shape[1]} objectives, expected {n_obj}.",
            expected=n_obj,
            actual=int(arr.shape[1]),
        )
    return arr


class Solutions:
    """
    Ordered collection of objective vectors sharing one objective count.

    Parameters
    ----------
    values : array-like
        Objective values, shape (n, n_obj). The data is copied.
    n_obj : int, optional
        Objective count; required when ``values`` is empty.
    """

    __slots__ = ("_F", "_consumed")

    def __init__(self, values: ArrayLike, n_obj: int | None = None) -> None:
        self._F = _as_matrix(values, n_obj, "Solutions")
        self._consumed = False

    @classmethod
    def _adopt(cls, F: np.ndarray) -> "Solutions":
        """Wrap an array this module already owns, without copying it."""
        obj = cls.__new__(cls)
        obj._F = F
        obj._consumed = False
        return obj

    def _array(self) -> np.ndarray:
        if self._consumed:
            raise SolutionsConsumedError()
        return self._F

    def _take(self) -> np.ndarray:
        """Move the data out; the handle is unusable afterwards."""
        F = self._array()
        self._consumed = True
        return F

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def objectives(self) -> int:
        return int(self._array().shape[1])

    @property
    def values(self) -> np.ndarray:
        """Read-only view of all objective vectors, shape (n, n_obj)."""
        return _readonly(self._array())

    def __len__(self) -> int:
        return int(self._array().shape[0])

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.values)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.values[index]

    def __repr__(self) -> str:
        if self._consumed:
            return "Solutions(<consumed>)"
        return f"Solutions(n={self._F.shape[0]}, n_obj={self._F.shape[1]})"


class Weights:
    """
    Immutable ordered set of reference directions.

    Parameters
    ----------
    vectors : array-like
        Reference directions, shape (n_ref, n_obj). Must be non-empty and
        contain no all-zero row.
    """

    __slots__ = ("_W",)

    def __init__(self, vectors: ArrayLike) -> None:
        W = np.array(vectors, dtype=np.float64, copy=True)
        if W.size == 0:
            raise EmptyWeightsError()
        if W.ndim != 2:
            raise DimensionMismatchError(f"Weights must be a 2D array, got shape {W.shape}.")
        zero_rows = np.flatnonzero(~np.any(W != 0.0, axis=1))
        if zero_rows.size:
            raise DegenerateWeightsError(int(zero_rows[0]))
        W.setflags(write=False)
        self._W = W

    @property
    def objectives(self) -> int:
        return int(self._W.shape[1])

    @property
    def values(self) -> np.ndarray:
        return self._W

    def __len__(self) -> int:
        return int(self._W.shape[0])

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self._W)

    def __getitem__(self, index: int) -> np.ndarray:
        return self._W[index]

    def __repr__(self) -> str:
        return f"Weights(n_ref={self._W.shape[0]}, n_obj={self._W.shape[1]})"
