"""
Curated set selection: the weighted books worth showing right now.
"""

import logging
from typing import List, Optional

from ..models.book import Book, BookType, CuratedBook, WeightedBook
from ..models.progress import ActiveSeries
from .classifier import ContinuationClassifier


class CuratedSetSelector:
    """
    Keeps standalones, series openers and next books in active series.

    Series openers are held back while a Progressive variant of the series
    still has unread books.
    """

    def __init__(self, classifier: Optional[ContinuationClassifier] = None):
        self.classifier = classifier or ContinuationClassifier()
        self.parser = self.classifier.parser
        self.resolver = self.classifier.resolver
        self.logger = logging.getLogger(self.__class__.__name__)

    def select(
        self,
        weighted_books: List[WeightedBook],
        active_series: List[ActiveSeries],
        all_books: List[Book],
    ) -> List[CuratedBook]:
        curated = []

        for weighted in weighted_books:
            try:
                entry = self._curate(weighted, active_series, all_books)
            except Exception as e:
                self.logger.warning(f"Failed to curate '{weighted.book.title}', treating as standalone: {e}")
                entry = self._entry(weighted, None, None, BookType.STANDALONE)
            if entry:
                curated.append(entry)

        self.logger.info(f"Curated {len(curated)} of {len(weighted_books)} books")
        return curated

    def _curate(
        self,
        weighted: WeightedBook,
        active_series: List[ActiveSeries],
        all_books: List[Book],
    ) -> Optional[CuratedBook]:
        book = weighted.book
        info = self.parser.extract(book.title)

        if not info.series_name:
            return self._entry(weighted, None, None, BookType.STANDALONE)

        if info.book_number == 1:
            if self.resolver.has_pending_variant(info.series_name, book.author, all_books):
                self.logger.debug(f"Holding back '{book.title}' until its Progressive series is read")
                return None
            return self._entry(weighted, info.series_name, info.book_number, BookType.FIRST_BOOK)

        if self.classifier.is_next_considering_progressive(book, active_series, all_books):
            return self._entry(weighted, info.series_name, info.book_number, BookType.NEXT_IN_SERIES)

        return None

    @staticmethod
    def _entry(weighted: WeightedBook, series_name, book_number, book_type: BookType) -> CuratedBook:
        return CuratedBook(
            book=weighted.book,
            weight=weighted.weight,
            reason=weighted.reason,
            series_name=series_name,
            book_number=book_number,
            book_type=book_type,
        )
