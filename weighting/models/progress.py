"""
Series progression models built from the full library.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .book import Shelf


SeriesKey = Tuple[str, str]


class BookStatus(str, Enum):
    """Reading status of one book inside a series"""
    READ = "read"
    CURRENTLY_READING = "currently-reading"
    READING_NEXT = "reading-next"
    TO_READ = "to-read"
    NOT_STARTED = "not-started"

    @classmethod
    def from_shelf(cls, shelf: Shelf) -> "BookStatus":
        return {
            Shelf.READ: cls.READ,
            Shelf.CURRENTLY_READING: cls.CURRENTLY_READING,
            Shelf.READING_NEXT: cls.READING_NEXT,
            Shelf.TO_READ: cls.TO_READ,
        }.get(shelf, cls.NOT_STARTED)

    @property
    def is_started(self) -> bool:
        return self in (BookStatus.READ, BookStatus.CURRENTLY_READING, BookStatus.READING_NEXT)

    @property
    def is_in_progress(self) -> bool:
        return self in (BookStatus.CURRENTLY_READING, BookStatus.READING_NEXT)


@dataclass
class BookProgress:
    """One numbered position in a series"""
    title: str
    book_number: float
    status: BookStatus
    author: str
    date_read: Optional[date] = None
    publication_year: Optional[int] = None
    inferred: bool = False  # number assigned by inference, not read from the title

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "book_number": self.book_number,
            "status": self.status.value,
            "author": self.author,
            "date_read": self.date_read.isoformat() if self.date_read else None,
            "inferred": self.inferred,
        }


@dataclass
class SeriesProgress:
    """Aggregate reading progress for one series + author"""
    series_name: str
    author: str
    normalized_author: str
    books: List[BookProgress] = field(default_factory=list)
    highest_book_number: float = 0
    books_read: int = 0
    books_in_progress: int = 0
    books_to_read: int = 0
    completion_percentage: float = 0.0
    first_read_date: Optional[date] = None
    last_read_date: Optional[date] = None
    current_book_number: Optional[float] = None

    @property
    def key(self) -> SeriesKey:
        return (self.series_name.lower(), self.normalized_author)

    def get_book(self, book_number: float) -> Optional[BookProgress]:
        for entry in self.books:
            if entry.book_number == book_number:
                return entry
        return None

    def has_title(self, title: str) -> bool:
        return any(entry.title == title for entry in self.books)

    def highest_read_book(self) -> Optional[BookProgress]:
        read = [b for b in self.books if b.status == BookStatus.READ]
        return max(read, key=lambda b: b.book_number) if read else None

    def to_dict(self) -> Dict:
        return {
            "series_name": self.series_name,
            "author": self.author,
            "books": [b.to_dict() for b in self.books],
            "highest_book_number": self.highest_book_number,
            "books_read": self.books_read,
            "books_in_progress": self.books_in_progress,
            "books_to_read": self.books_to_read,
            "completion_percentage": round(self.completion_percentage, 2),
            "first_read_date": self.first_read_date.isoformat() if self.first_read_date else None,
            "last_read_date": self.last_read_date.isoformat() if self.last_read_date else None,
            "current_book_number": self.current_book_number,
        }


@dataclass
class SeriesProgressionTimeline:
    """All in-motion series, most recently active first"""
    series: List[SeriesProgress] = field(default_factory=list)
    total_series: int = 0
    total_books_read: int = 0
    total_books_in_progress: int = 0

    def to_dict(self) -> Dict:
        return {
            "series": [s.to_dict() for s in self.series],
            "total_series": self.total_series,
            "total_books_read": self.total_books_read,
            "total_books_in_progress": self.total_books_in_progress,
        }


@dataclass
class ActiveSeries:
    """A series the reader is currently progressing through"""
    series_name: str
    author: str
    current_book: str
    current_book_number: float
    normalized_author: str

    @property
    def key(self) -> SeriesKey:
        return (self.series_name.lower(), self.normalized_author)

    def to_dict(self) -> Dict:
        return {
            "series_name": self.series_name,
            "author": self.author,
            "current_book": self.current_book,
            "current_book_number": self.current_book_number,
        }
