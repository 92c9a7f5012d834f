from __future__ import annotations

import numpy as np
import pytest

from refniche.foundation.exceptions import (
    DegenerateWeightsError,
    DimensionMismatchError,
    EmptyWeightsError,
    SolutionsConsumedError,
)
from refniche.foundation.solutions import Solutions, Weights


class TestSolutions:
    def test_basic_properties(self) -> None:
        F = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        sols = Solutions(F)

        assert sols.objectives == 2
        assert len(sols) == 3
        assert [row.tolist() for row in sols] == F.tolist()
        np.testing.assert_array_equal(sols[1], [3.0, 4.0])

    def test_data_is_copied_and_read_only(self) -> None:
        F = np.array([[1.0, 2.0]])
        sols = Solutions(F)
        F[0, 0] = 99.0

        assert sols[0][0] == 1.0
        with pytest.raises(ValueError):
            sols.values[0, 0] = 7.0
        with pytest.raises(ValueError):
            sols[0][1] = 7.0

    def test_empty_requires_objective_count(self) -> None:
        sols = Solutions([], n_obj=3)
        assert len(sols) == 0
        assert sols.objectives == 3
        assert Solutions(np.empty((0, 2))).objectives == 2
        with pytest.raises(DimensionMismatchError):
            Solutions([])

    @pytest.mark.parametrize(
        "values",
        [
            [1.0, 2.0],
            [[[1.0]]],
            [[]],
        ],
    )
    def test_invalid_shapes(self, values) -> None:
        with pytest.raises(DimensionMismatchError):
            Solutions(values)

    @pytest.mark.parametrize(
        "values, n_obj",
        [
            (np.empty((3, 0)), 2),
            (np.empty((0, 3)), 2),
            ([[]], None),
        ],
    )
    def test_empty_rows_or_columns_are_not_reshaped(self, values, n_obj) -> None:
        with pytest.raises(DimensionMismatchError):
            Solutions(values, n_obj=n_obj)

    def test_objective_count_mismatch(self) -> None:
        with pytest.raises(DimensionMismatchError) as info:
            Solutions([[1.0, 2.0]], n_obj=3)
        assert info.value.details == {"expected": 3, "actual": 2}

    def test_consumed_handle_is_unusable(self) -> None:
        sols = Solutions([[1.0, 2.0]])
        data = sols._take()

        assert sols.consumed
        assert data.shape == (1, 2)
        assert "consumed" in repr(sols)
        with pytest.raises(SolutionsConsumedError):
            len(sols)
        with pytest.raises(SolutionsConsumedError):
            _ = sols.values
        with pytest.raises(SolutionsConsumedError):
            sols._take()


class TestWeights:
    def test_basic_properties(self) -> None:
        W = Weights([[1.0, 0.0], [0.5, 0.5], [0.0, 1.0]])
        assert len(W) == 3
        assert W.objectives == 2
        np.testing.assert_array_equal(W[1], [0.5, 0.5])
        assert [w.tolist() for w in W][2] == [0.0, 1.0]
        assert repr(W) == "Weights(n_ref=3, n_obj=2)"

    def test_immutable(self) -> None:
        source = np.array([[1.0, 0.0]])
        W = Weights(source)
        source[0, 0] = 5.0
        assert W[0][0] == 1.0
        with pytest.raises(ValueError):
            W.values[0, 0] = 2.0

    def test_empty_rejected(self) -> None:
        with pytest.raises(EmptyWeightsError):
            Weights([])
        with pytest.raises(EmptyWeightsError):
            Weights(np.empty((0, 3)))

    def test_zero_direction_rejected(self) -> None:
        with pytest.raises(DegenerateWeightsError) as info:
            Weights([[1.0, 0.0], [0.0, 0.0]])
        assert info.value.details["index"] == 1

    def test_one_dimensional_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError):
            Weights([1.0, 0.0])
