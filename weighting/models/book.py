"""
Data models for book records and weighting results.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Optional


class Shelf(str, Enum):
    """Goodreads exclusive shelf values"""
    TO_READ = "to-read"
    CURRENTLY_READING = "currently-reading"
    READING_NEXT = "reading-next"
    READ = "read"
    OTHER = "other"

    @classmethod
    def normalize(cls, value) -> "Shelf":
        """Map a raw shelf label (any case, padded) to a Shelf, OTHER if unknown"""
        if isinstance(value, Shelf):
            return value
        label = str(value or "").strip().lower()
        try:
            return cls(label)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Book:
    """
    A single record from the library export.

    Only the fields the weighting engine consumes are kept; records are
    immutable once loaded.
    """
    title: str
    author: str
    exclusive_shelf: str = Shelf.TO_READ.value
    bookshelves: str = ""
    date_read: Optional[date] = None
    year_published: Optional[int] = None
    original_publication_year: Optional[int] = None
    goodreads_id: Optional[str] = None

    @property
    def shelf(self) -> Shelf:
        return Shelf.normalize(self.exclusive_shelf)

    @property
    def publication_year(self) -> Optional[int]:
        """Original publication year, falling back to the edition year"""
        return self.original_publication_year or self.year_published

    def to_dict(self) -> Dict:
        return {
            "goodreads_id": self.goodreads_id,
            "title": self.title,
            "author": self.author,
            "exclusive_shelf": self.shelf.value,
            "bookshelves": self.bookshelves,
            "date_read": self.date_read.isoformat() if self.date_read else None,
            "publication_year": self.publication_year,
        }


@dataclass(frozen=True)
class SeriesInfo:
    """Series name and position parsed from a title"""
    series_name: Optional[str] = None
    book_number: Optional[float] = None

    @property
    def is_series(self) -> bool:
        return self.series_name is not None

    @property
    def is_numbered(self) -> bool:
        return self.series_name is not None and self.book_number is not None


@dataclass
class WeightedBook:
    """A to-read book with its selection weight"""
    book: Book
    weight: int
    reason: str

    def to_dict(self) -> Dict:
        return {
            "title": self.book.title,
            "author": self.book.author,
            "bookshelves": self.book.bookshelves,
            "weight": self.weight,
            "reason": self.reason,
        }


class BookType(str, Enum):
    """Why a book made it into the curated set"""
    STANDALONE = "Standalone"
    FIRST_BOOK = "First Book"
    NEXT_IN_SERIES = "Next in Series"


@dataclass
class CuratedBook:
    """A weighted book that is worth showing now"""
    book: Book
    weight: int
    reason: str
    series_name: Optional[str]
    book_number: Optional[float]
    book_type: BookType

    def to_dict(self) -> Dict:
        return {
            "title": self.book.title,
            "author": self.book.author,
            "weight": self.weight,
            "reason": self.reason,
            "series_name": self.series_name,
            "book_number": self.book_number,
            "book_type": self.book_type.value,
        }
