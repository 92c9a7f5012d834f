"""
Foundation layer: exceptions, logging, vector primitives, containers and
Pareto utilities.
"""

from .exceptions import (
    ConfigurationError,
    DegenerateWeightsError,
    DimensionMismatchError,
    EmptyWeightsError,
    RefNicheError,
    SingularMatrixError,
    SolutionsConsumedError,
)
from .finding import argmin
from .logging import configure_refniche_logging
from .pareto import crowding_distance, front, rank
from .solutions import Solutions, Weights

__all__ = [
    "RefNicheError",
    "ConfigurationError",
    "DimensionMismatchError",
    "EmptyWeightsError",
    "DegenerateWeightsError",
    "SingularMatrixError",
    "SolutionsConsumedError",
    "argmin",
    "configure_refniche_logging",
    "rank",
    "front",
    "crowding_distance",
    "Solutions",
    "Weights",
]
