"""
Continuation classification, weighting and curation.
"""

from .classifier import ContinuationClassifier, NEXT_NUMBER_TOLERANCE
from .weights import (
    WeightAssigner,
    weight_distribution,
    NEXT_IN_SERIES_WEIGHT,
    STANDARD_WEIGHT,
    STANDARD_REASON,
)
from .curation import CuratedSetSelector

__all__ = [
    "ContinuationClassifier",
    "NEXT_NUMBER_TOLERANCE",
    "WeightAssigner",
    "weight_distribution",
    "NEXT_IN_SERIES_WEIGHT",
    "STANDARD_WEIGHT",
    "STANDARD_REASON",
    "CuratedSetSelector",
]
