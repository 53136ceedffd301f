"""
Continuation classification: is a book the next one in an active series?
"""

import logging
from typing import List, Optional

from ..models.book import Book, SeriesInfo
from ..models.progress import ActiveSeries
from ..series.progressive import ProgressiveSeriesResolver
from ..series.title_parser import TitleParser, normalize_author

# Absorbs float noise and half-number increments
NEXT_NUMBER_TOLERANCE = 0.1


class ContinuationClassifier:
    """Matches candidate books against active series positions"""

    def __init__(
        self,
        parser: Optional[TitleParser] = None,
        resolver: Optional[ProgressiveSeriesResolver] = None,
    ):
        self.parser = parser or TitleParser()
        self.resolver = resolver or ProgressiveSeriesResolver(self.parser)
        self.logger = logging.getLogger(self.__class__.__name__)

    def find_match(self, book: Book, active_series: List[ActiveSeries]) -> Optional[ActiveSeries]:
        """Active series with the book's series name (any case) and author"""
        info = self.parser.extract(book.title)
        if not info.series_name:
            return None
        return self._match(info, book.author, active_series)

    def is_next(self, book: Book, active_series: List[ActiveSeries]) -> bool:
        info = self.parser.extract(book.title)
        if not info.is_numbered:
            return False

        matched = self._match(info, book.author, active_series)
        if matched is None:
            return False

        return self._follows(info.book_number, matched)

    def is_next_considering_progressive(
        self,
        book: Book,
        active_series: List[ActiveSeries],
        all_books: List[Book],
    ) -> bool:
        """
        Like is_next, but book #1 of a base series stays locked while its
        Progressive variant has unread books, and unlocks once that variant
        is fully read.
        """
        info = self.parser.extract(book.title)
        if not info.is_numbered:
            return False

        if self.resolver.detect_progressive(info.series_name).is_progressive:
            matched = self._match(info, book.author, active_series)
            return matched is not None and self._follows(info.book_number, matched)

        if info.book_number == 1:
            if self.resolver.has_pending_variant(info.series_name, book.author, all_books):
                self.logger.debug(f"'{book.title}' locked behind Progressive variant")
                return False
            if self.resolver.has_completed_variant(info.series_name, book.author, all_books):
                return True

        return self.is_next(book, active_series)

    def _match(self, info: SeriesInfo, author: str, active_series: List[ActiveSeries]) -> Optional[ActiveSeries]:
        name = info.series_name.lower()
        normalized = normalize_author(author)
        for series in active_series:
            if series.series_name.lower() == name and series.normalized_author == normalized:
                return series
        return None

    @staticmethod
    def _follows(book_number: float, matched: ActiveSeries) -> bool:
        expected = matched.current_book_number + 1
        return abs(book_number - expected) < NEXT_NUMBER_TOLERANCE
