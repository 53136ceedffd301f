"""
Data models for the series weighting engine.
"""

from .book import Book, BookType, CuratedBook, SeriesInfo, Shelf, WeightedBook
from .progress import (
    ActiveSeries,
    BookProgress,
    BookStatus,
    SeriesKey,
    SeriesProgress,
    SeriesProgressionTimeline,
)

__all__ = [
    "Book",
    "BookType",
    "CuratedBook",
    "SeriesInfo",
    "Shelf",
    "WeightedBook",
    "ActiveSeries",
    "BookProgress",
    "BookStatus",
    "SeriesKey",
    "SeriesProgress",
    "SeriesProgressionTimeline",
]
