"""
Weight assignment for to-read books.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional

from ..models.book import Book, WeightedBook
from ..models.progress import ActiveSeries
from .classifier import ContinuationClassifier

NEXT_IN_SERIES_WEIGHT = 5
STANDARD_WEIGHT = 1
STANDARD_REASON = "Standard weight"


class WeightAssigner:
    """Gives series continuations a higher selection weight"""

    def __init__(self, classifier: Optional[ContinuationClassifier] = None):
        self.classifier = classifier or ContinuationClassifier()
        self.logger = logging.getLogger(self.__class__.__name__)

    def assign(self, books: List[Book], active_series: List[ActiveSeries]) -> List[WeightedBook]:
        """
        Weight each book.

        Args:
            books: Candidate books (normally the to-read shelf)
            active_series: Output of ActiveSeriesDetector

        Returns:
            One WeightedBook per input book, same order
        """
        weighted = [self.weigh(book, active_series) for book in books]

        high_priority = sum(1 for wb in weighted if wb.weight > STANDARD_WEIGHT)
        self.logger.info(f"Weighted {len(weighted)} books ({high_priority} series continuations)")
        return weighted

    def weigh(self, book: Book, active_series: List[ActiveSeries]) -> WeightedBook:
        try:
            if self.classifier.is_next(book, active_series):
                matched = self.classifier.find_match(book, active_series)
                series_name = matched.series_name if matched else "active"
                return WeightedBook(
                    book=book,
                    weight=NEXT_IN_SERIES_WEIGHT,
                    reason=f"Next book in {series_name} series",
                )
        except Exception as e:
            self.logger.warning(f"Failed to classify '{book.title}', using standard weight: {e}")

        return WeightedBook(book=book, weight=STANDARD_WEIGHT, reason=STANDARD_REASON)


def weight_distribution(weighted_books: List[WeightedBook]) -> Dict[int, int]:
    """Count of books per weight, highest weight first"""
    counts = Counter(wb.weight for wb in weighted_books)
    return dict(sorted(counts.items(), key=lambda item: item[0], reverse=True))
