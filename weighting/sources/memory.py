"""
In-memory book source.
"""

from typing import Iterable, List

from ..models.book import Book
from .base import BookSource


class InMemoryBookSource(BookSource):
    """Serves an already-materialized list of books"""

    def __init__(self, books: Iterable[Book]):
        self._books = list(books)

    def load_books(self) -> List[Book]:
        return list(self._books)
