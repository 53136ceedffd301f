"""
Series-continuation weighting for Goodreads libraries.

Primary interfaces:
- BookWeightingPipeline: Weights, curated set, timeline and export in one run
- GoodreadsCSVSource: Load books from a Goodreads CSV export
- SeriesTimelineBuilder: Per-series reading progression
- ActiveSeriesDetector: Series the reader is currently progressing through

Scoring interfaces:
- ContinuationClassifier: Is a book the next one in an active series?
- WeightAssigner: Priority weight per to-read book
- CuratedSetSelector: Books worth showing right now
"""

from .models import (
    ActiveSeries,
    Book,
    BookProgress,
    BookStatus,
    BookType,
    CuratedBook,
    SeriesInfo,
    SeriesProgress,
    SeriesProgressionTimeline,
    Shelf,
    WeightedBook,
)
from .series import (
    ActiveSeriesDetector,
    ProgressiveSeriesResolver,
    SeriesTimelineBuilder,
    TitleParser,
    extract_series_info,
    normalize_author,
)
from .scoring import ContinuationClassifier, CuratedSetSelector, WeightAssigner, weight_distribution
from .sources import BookSource, GoodreadsCSVSource, InMemoryBookSource
from .pipeline import (
    BookWeightingPipeline,
    WeightingExporter,
    build_timeline,
    compute_weighted_books,
    create_weighting_json,
    quick_pipeline,
    select_curated_set,
)
from .utils import TimelineFormatter

__all__ = [
    # Primary interface
    "BookWeightingPipeline",
    "GoodreadsCSVSource",
    "InMemoryBookSource",
    "BookSource",
    "compute_weighted_books",
    "build_timeline",
    "select_curated_set",
    "quick_pipeline",

    # Series engine
    "TitleParser",
    "extract_series_info",
    "normalize_author",
    "ProgressiveSeriesResolver",
    "SeriesTimelineBuilder",
    "ActiveSeriesDetector",

    # Scoring
    "ContinuationClassifier",
    "WeightAssigner",
    "CuratedSetSelector",
    "weight_distribution",

    # Export and display
    "WeightingExporter",
    "create_weighting_json",
    "TimelineFormatter",

    # Models
    "ActiveSeries",
    "Book",
    "BookProgress",
    "BookStatus",
    "BookType",
    "CuratedBook",
    "SeriesInfo",
    "SeriesProgress",
    "SeriesProgressionTimeline",
    "Shelf",
    "WeightedBook",
]
