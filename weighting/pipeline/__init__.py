"""
Orchestration and export for the weighting engine.
"""

from .exporter import WeightingExporter, create_weighting_json, TABLE_COLUMNS
from .weighting_pipeline import (
    BookWeightingPipeline,
    build_timeline,
    compute_weighted_books,
    quick_pipeline,
    select_curated_set,
)

__all__ = [
    "WeightingExporter",
    "create_weighting_json",
    "TABLE_COLUMNS",
    "BookWeightingPipeline",
    "build_timeline",
    "compute_weighted_books",
    "quick_pipeline",
    "select_curated_set",
]
