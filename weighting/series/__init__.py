"""
Series inference and progression tracking.
"""

from .title_parser import (
    TitleParser,
    TitlePattern,
    TITLE_PATTERNS,
    extract_series_info,
    looks_like_series,
    normalize_author,
    series_key,
)
from .progressive import ProgressiveInfo, ProgressiveSeriesResolver
from .timeline import SeriesTimelineBuilder
from .active import ActiveSeriesDetector, RECENT_READ_WINDOW_YEARS

__all__ = [
    "TitleParser",
    "TitlePattern",
    "TITLE_PATTERNS",
    "extract_series_info",
    "looks_like_series",
    "normalize_author",
    "series_key",
    "ProgressiveInfo",
    "ProgressiveSeriesResolver",
    "SeriesTimelineBuilder",
    "ActiveSeriesDetector",
    "RECENT_READ_WINDOW_YEARS",
]
