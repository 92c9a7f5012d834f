"""
NSGA-III normalization and association.

This package provides the reference-point steps of NSGA-III environmental
selection:
- `linalg.py`: Gaussian elimination for the hyperplane intercepts
- `config.py`: NormalizerConfig builder
- `normalizer.py`: ideal point, extreme points, intercepts, rescaling
- `association.py`: nearest-reference-line assignment

References:
    K. Deb and H. Jain, "An Evolutionary Many-Objective Optimization Algorithm
    Using Reference-Point-Based Nondominated Sorting Approach, Part I: Solving
    Problems With Box Constraints," IEEE Trans. Evolutionary Computation,
    vol. 18, no. 4, 2014.
"""

from .association import Associate, associate
from .config import NormalizerConfig, NormalizerConfigData
from .linalg import EPS, solve
from .normalizer import (
    Normalizer,
    asf,
    compute_intercepts,
    extreme_points,
    ideal_point,
    normalize,
    rescale,
    translate,
)

__all__ = [
    "Associate",
    "associate",
    # Config
    "NormalizerConfig",
    "NormalizerConfigData",
    # Solver
    "EPS",
    "solve",
    # Normalization
    "Normalizer",
    "normalize",
    "ideal_point",
    "translate",
    "asf",
    "extreme_points",
    "compute_intercepts",
    "rescale",
]
