"""
Book source interface consumed by the weighting engine.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.book import Book, Shelf


class BookSource(ABC):
    """Abstract provider of the full library record set"""

    @abstractmethod
    def load_books(self) -> List[Book]:
        """Return every book record. I/O errors propagate to the caller."""
        pass

    def load_books_by_shelf(self, shelf) -> List[Book]:
        """Books on one exclusive shelf; equivalent to filtering load_books()"""
        wanted = Shelf.normalize(shelf)
        return [book for book in self.load_books() if book.shelf == wanted]

    def get_to_read_books(self) -> List[Book]:
        return self.load_books_by_shelf(Shelf.TO_READ)

    def get_currently_reading_books(self) -> List[Book]:
        return self.load_books_by_shelf(Shelf.CURRENTLY_READING)

    def get_reading_next_books(self) -> List[Book]:
        return self.load_books_by_shelf(Shelf.READING_NEXT)

    def get_read_books(self) -> List[Book]:
        return self.load_books_by_shelf(Shelf.READ)
