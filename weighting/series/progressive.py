"""
Progressive sub-series detection.

Some franchises publish an alternate numbering track named
"<Base>: Progressive" (e.g. "Sword Art Online: Progressive"). That track is
read before book #1 of the base series.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from ..models.book import Book, Shelf
from .title_parser import TitleParser, normalize_author

PROGRESSIVE_PATTERN = re.compile(r"^(.+?)\s*:\s*progressive\b(.*)$", re.IGNORECASE)

PENDING_SHELVES = (Shelf.TO_READ, Shelf.CURRENTLY_READING, Shelf.READING_NEXT)


@dataclass(frozen=True)
class ProgressiveInfo:
    is_progressive: bool
    base_series: Optional[str] = None


class ProgressiveSeriesResolver:
    """Relates Progressive series names to their base series"""

    def __init__(self, parser: Optional[TitleParser] = None):
        self.parser = parser or TitleParser()

    def detect_progressive(self, series_name: Optional[str]) -> ProgressiveInfo:
        if not series_name:
            return ProgressiveInfo(is_progressive=False)

        match = PROGRESSIVE_PATTERN.match(series_name.strip())
        if not match:
            return ProgressiveInfo(is_progressive=False)

        return ProgressiveInfo(is_progressive=True, base_series=match.group(1).strip())

    def is_base_series(self, candidate_base: str, series_name: str) -> bool:
        info = self.detect_progressive(series_name)
        if not info.is_progressive or not candidate_base:
            return False
        return info.base_series.lower() == candidate_base.strip().lower()

    def find_variant_books(self, base_series: str, author: str, books: List[Book]) -> List[Book]:
        """All books by the same author that belong to a Progressive variant of base_series"""
        normalized = normalize_author(author)
        variant_books = []

        for book in books:
            if normalize_author(book.author) != normalized:
                continue
            info = self.parser.extract(book.title)
            if info.series_name and self.is_base_series(base_series, info.series_name):
                variant_books.append(book)

        return variant_books

    def has_pending_variant(self, base_series: str, author: str, books: List[Book]) -> bool:
        """True while a Progressive variant still has unread entries"""
        variant_books = self.find_variant_books(base_series, author, books)
        return any(book.shelf in PENDING_SHELVES for book in variant_books)

    def has_completed_variant(self, base_series: str, author: str, books: List[Book]) -> bool:
        """True once a Progressive variant exists and every tracked entry is read"""
        variant_books = self.find_variant_books(base_series, author, books)
        read_books = [book for book in variant_books if book.shelf == Shelf.READ]
        return bool(read_books) and not any(book.shelf in PENDING_SHELVES for book in variant_books)
