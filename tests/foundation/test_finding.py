from __future__ import annotations

import math

from refniche.foundation.finding import argmin


def test_argmin_first_minimum_wins() -> None:
    values = [3.0, 1.0, 1.0, 2.0]
    assert argmin(0, len(values), values.__getitem__) == 1


def test_argmin_respects_range() -> None:
    values = [0.0, 5.0, 4.0, 4.0, 9.0]
    assert argmin(1, 5, values.__getitem__) == 2
    assert argmin(3, 4, values.__getitem__) == 3


def test_argmin_empty_range() -> None:
    assert argmin(0, 0, lambda i: 0.0) == -1
    assert argmin(3, 2, lambda i: 0.0) == -1


def test_argmin_nan_keys() -> None:
    leading_nan = [math.nan, 0.0, -1.0]
    trailing_nan = [1.0, math.nan, 0.0]
    assert argmin(0, 3, leading_nan.__getitem__) == 0
    assert argmin(0, 3, trailing_nan.__getitem__) == 2
