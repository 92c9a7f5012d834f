"""
refniche exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All refniche-specific exceptions inherit from RefNicheError for easy catching.

Example:
    try:
        buckets = associate(normalize(solutions), weights)
    except RefNicheError as e:
        logger.error("Environmental selection failed: %s", e)
"""

from __future__ import annotations

from typing import Any


class RefNicheError(Exception):
    """
    Base exception for all refniche errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(RefNicheError):
    """Raised when a normalizer configuration is invalid or incomplete."""

    pass


# =============================================================================
# Shape Errors
# =============================================================================


class DimensionMismatchError(RefNicheError, ValueError):
    """Raised when objective counts or array shapes do not agree."""

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        suggestion = "All objective vectors and reference directions of one call must have the same length"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})


class EmptyWeightsError(RefNicheError, ValueError):
    """Raised when a reference direction set contains no vectors."""

    def __init__(self) -> None:
        message = "Reference direction set is empty."
        suggestion = "Provide at least one reference direction (e.g. a simplex-lattice design)"
        super().__init__(message, suggestion)


class DegenerateWeightsError(RefNicheError, ValueError):
    """Raised when a reference direction has zero length."""

    def __init__(self, index: int) -> None:
        message = f"Reference direction {index} is the zero vector."
        suggestion = "Remove all-zero rows; a direction needs at least one non-zero component"
        super().__init__(message, suggestion, {"index": index})


# =============================================================================
# Runtime Errors
# =============================================================================


class SingularMatrixError(RefNicheError, ArithmeticError):
    """Raised when Gaussian elimination meets a (near) zero pivot."""

    def __init__(self, column: int, pivot: float) -> None:
        message = f"Matrix is (near) singular: pivot {pivot!r} in column {column}."
        suggestion = "The extreme points do not span a hyperplane; use the nadir-based fallback"
        super().__init__(message, suggestion, {"column": column, "pivot": pivot})


class SolutionsConsumedError(RefNicheError):
    """Raised when a Solutions handle is used after it has been moved."""

    def __init__(self) -> None:
        message = "This Solutions instance has been consumed by normalize()."
        suggestion = "Continue with the Solutions object returned by normalize()"
        super().__init__(message, suggestion)


__all__ = [
    "RefNicheError",
    "ConfigurationError",
    "DimensionMismatchError",
    "EmptyWeightsError",
    "DegenerateWeightsError",
    "SingularMatrixError",
    "SolutionsConsumedError",
]
