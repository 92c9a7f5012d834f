"""
refniche: normalization and reference-point association for NSGA-III.

Typical use inside an environmental selection step::

    from refniche import Normalizer, Associate, Solutions, Weights

    normalized = Normalizer().normalize(Solutions(F_combined))
    buckets = Associate(Weights(ref_dirs)).associate(normalized)
"""

from .engine.nsgaiii import (
    Associate,
    Normalizer,
    NormalizerConfig,
    NormalizerConfigData,
    associate,
    normalize,
    solve,
)
from .foundation import (
    ConfigurationError,
    DegenerateWeightsError,
    DimensionMismatchError,
    EmptyWeightsError,
    RefNicheError,
    SingularMatrixError,
    Solutions,
    SolutionsConsumedError,
    Weights,
    argmin,
    configure_refniche_logging,
)
from .foundation.pareto import crowding_distance, front, rank
from .foundation.vector import compare, distance, dominance, dot, magnitude, scale, subtract

__all__ = [
    "Associate",
    "Normalizer",
    "NormalizerConfig",
    "NormalizerConfigData",
    "associate",
    "normalize",
    "solve",
    "Solutions",
    "Weights",
    "argmin",
    "compare",
    "distance",
    "dominance",
    "dot",
    "magnitude",
    "scale",
    "subtract",
    "rank",
    "front",
    "crowding_distance",
    "configure_refniche_logging",
    "RefNicheError",
    "ConfigurationError",
    "DimensionMismatchError",
    "EmptyWeightsError",
    "DegenerateWeightsError",
    "SingularMatrixError",
    "SolutionsConsumedError",
]
