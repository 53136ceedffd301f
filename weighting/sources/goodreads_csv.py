"""
Goodreads CSV export source.
Parses the export columns the weighting engine needs into Book records.
"""

import pandas as pd
import logging
from typing import List, Optional
from datetime import datetime, date

from ..models.book import Book
from .base import BookSource

REQUIRED_COLUMNS = ["Title", "Author", "Exclusive Shelf"]

# Goodreads exports dates in a few shapes depending on account age
DATE_FORMATS = [
    "%Y/%m/%d",     # 2024/11/28
    "%Y-%m-%d",     # 2024-11-28
    "%m/%d/%Y",     # 11/28/2024
    "%Y/%m",        # 2024/11 (assume first of month)
    "%Y"            # 2024 (assume January 1st)
]


class GoodreadsCSVSource(BookSource):
    """
    Loads a Goodreads library export into Book records.

    Key features:
    - Reads the CSV once per source instance
    - Skips rows that cannot be converted, logging a warning
    - Treats unparseable dates and years as missing
    """

    def __init__(self, csv_path: str):
        self.csv_path = csv_path
        self._books: Optional[List[Book]] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_books(self) -> List[Book]:
        """
        Load every book from the export.

        Returns:
            List of Book records in file order

        Raises:
            FileNotFoundError, pandas.errors.ParserError: source unreadable
            ValueError: required columns are missing
        """
        if self._books is None:
            self._books = self._read_csv()
        return list(self._books)

    def _read_csv(self) -> List[Book]:
        self.logger.info(f"Loading books from {self.csv_path}")

        df = pd.read_csv(self.csv_path, dtype=str, skip_blank_lines=True)

        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise ValueError(f"CSV {self.csv_path} is missing required columns: {missing}")

        books = []
        for _, row in df.iterrows():
            book = self._row_to_book(row)
            if book:
                books.append(book)

        self.logger.info(f"Loaded {len(books)} books ({len(df) - len(books)} rows skipped)")
        return books

    def _row_to_book(self, row: pd.Series) -> Optional[Book]:
        """
        Convert a CSV row to a Book.

        Args:
            row: Pandas Series representing a CSV row

        Returns:
            Book or None if the row has no title
        """
        try:
            title = self._safe_str(row.get("Title"))
            if not title:
                self.logger.warning("Skipping row without a title")
                return None

            return Book(
                title=title,
                author=self._safe_str(row.get("Author")) or "",
                exclusive_shelf=self._safe_str(row.get("Exclusive Shelf")) or "",
                bookshelves=self._safe_str(row.get("Bookshelves")) or "",
                date_read=self._parse_date(row.get("Date Read")),
                year_published=self._safe_int(row.get("Year Published")),
                original_publication_year=self._safe_int(row.get("Original Publication Year")),
                goodreads_id=self._safe_str(row.get("Book Id")),
            )

        except Exception as e:
            self.logger.warning(f"Failed to process row: {e}")
            return None

    def _parse_date(self, date_str) -> Optional[date]:
        """Parse date string to date object"""
        if date_str is None or pd.isna(date_str) or str(date_str).strip() == "":
            return None

        date_str = str(date_str).strip()

        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(date_str, fmt).date()
            except ValueError:
                continue

        self.logger.warning(f"Could not parse date: {date_str}")
        return None

    def _safe_str(self, value) -> Optional[str]:
        """Safely convert to string, handling NaN"""
        if value is None or pd.isna(value) or str(value).strip() == "":
            return None
        return str(value).strip()

    def _safe_int(self, value) -> Optional[int]:
        """Safely convert to int, handling NaN and invalid values"""
        if value is None or pd.isna(value) or str(value).strip() == "":
            return None
        try:
            return int(float(value))  # Handle "3.0" -> 3
        except (ValueError, TypeError):
            self.logger.warning(f"Could not parse year: {value}")
            return None
