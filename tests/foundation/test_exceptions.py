"""Tests for refniche exception hierarchy."""

from __future__ import annotations

import pytest


class TestRefNicheError:
    """Test base RefNicheError class."""

    def test_basic_error(self):
        """RefNicheError should work with just a message."""
        from refniche.foundation.exceptions import RefNicheError

        err = RefNicheError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None

    def test_error_with_suggestion(self):
        """RefNicheError should include suggestion in message."""
        from refniche.foundation.exceptions import RefNicheError

        err = RefNicheError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)
        assert err.suggestion == "Try this instead"

    def test_error_with_details(self):
        """RefNicheError should store details."""
        from refniche.foundation.exceptions import RefNicheError

        err = RefNicheError("Error", details={"key": "value"})
        assert err.details == {"key": "value"}


class TestShapeErrors:
    """Test shape and reference set errors."""

    def test_dimension_mismatch_is_value_error(self):
        from refniche.foundation.exceptions import DimensionMismatchError

        err = DimensionMismatchError("lengths differ", expected=3, actual=2)
        assert isinstance(err, ValueError)
        assert err.details == {"expected": 3, "actual": 2}
        assert "same length" in str(err)

    def test_empty_weights_error(self):
        from refniche.foundation.exceptions import EmptyWeightsError

        err = EmptyWeightsError()
        assert "empty" in str(err)
        assert err.suggestion is not None

    def test_degenerate_weights_error_reports_index(self):
        from refniche.foundation.exceptions import DegenerateWeightsError

        err = DegenerateWeightsError(4)
        assert "4" in str(err)
        assert err.details["index"] == 4


class TestRuntimeErrors:
    def test_singular_matrix_error_is_arithmetic_error(self):
        from refniche.foundation.exceptions import SingularMatrixError

        err = SingularMatrixError(1, 0.0)
        assert isinstance(err, ArithmeticError)
        assert err.details == {"column": 1, "pivot": 0.0}
        assert "singular" in err.message

    def test_solutions_consumed_error(self):
        from refniche.foundation.exceptions import SolutionsConsumedError

        err = SolutionsConsumedError()
        assert "normalize()" in str(err)


class TestExceptionHierarchy:
    """Every refniche error can be caught through the base class."""

    @pytest.mark.parametrize(
        "factory",
        [
            lambda m: m.ConfigurationError("bad"),
            lambda m: m.DimensionMismatchError("bad"),
            lambda m: m.EmptyWeightsError(),
            lambda m: m.DegenerateWeightsError(0),
            lambda m: m.SingularMatrixError(0, 0.0),
            lambda m: m.SolutionsConsumedError(),
        ],
    )
    def test_catch_as_base(self, factory):
        from refniche.foundation import exceptions

        with pytest.raises(exceptions.RefNicheError):
            raise factory(exceptions)

    def test_public_exports(self):
        import refniche

        for name in (
            "RefNicheError",
            "ConfigurationError",
            "DimensionMismatchError",
            "EmptyWeightsError",
            "DegenerateWeightsError",
            "SingularMatrixError",
            "SolutionsConsumedError",
        ):
            assert hasattr(refniche, name)
