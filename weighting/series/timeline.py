"""
Series progression timeline builder.

Groups the whole library into series and works out how far the reader has
got in each one. The build runs as explicit stages over a shared series map:

1. collect_numbered  - books whose titles carry a series number
2. infer_unnumbered  - series-tagged books without a number, placed by
                       publication year before the earliest numbered book
3. fill_gaps         - same-author books with no series marker, placed into
                       numbering gaps by publication year
4. finalize          - statistics, filtering and ordering
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..models.book import Book, SeriesInfo
from ..models.progress import (
    BookProgress,
    BookStatus,
    SeriesKey,
    SeriesProgress,
    SeriesProgressionTimeline,
)
from .title_parser import TitleParser, normalize_author, series_key

# Books without a publication year sort after every dated book
UNKNOWN_YEAR = 9999

SeriesMap = Dict[SeriesKey, SeriesProgress]
ParsedBook = Tuple[Book, SeriesInfo]


def publication_year_or_unknown(book: Optional[Book]) -> int:
    if book is None or not book.publication_year:
        return UNKNOWN_YEAR
    return book.publication_year


def _status_rank(status: BookStatus) -> int:
    if status.is_in_progress:
        return 2
    if status == BookStatus.READ:
        return 1
    return 0


class SeriesTimelineBuilder:
    """
    Builds a SeriesProgressionTimeline from the full book collection.

    Only series the reader has begun (first book started) and not yet
    finished appear in the result.
    """

    def __init__(self, parser: Optional[TitleParser] = None):
        self.parser = parser or TitleParser()
        self.logger = logging.getLogger(self.__class__.__name__)

    def build(self, all_books: List[Book]) -> SeriesProgressionTimeline:
        """
        Run every stage over the collection.

        Args:
            all_books: Every book in the library, any shelf

        Returns:
            SeriesProgressionTimeline with in-motion series, most recent first
        """
        parsed = self.parse_books(all_books)

        series_map = self.collect_numbered(parsed)
        self.logger.debug(f"Direct pass: {len(series_map)} numbered series")

        inferred = self.infer_unnumbered(series_map, parsed)
        gap_filled = self.fill_gaps(series_map, parsed)
        if inferred or gap_filled:
            self.logger.debug(f"Inferred {inferred} unnumbered and {gap_filled} gap-filled books")

        timeline = self.finalize(series_map)
        self.logger.info(
            f"Timeline built: {timeline.total_series} active series, "
            f"{timeline.total_books_read} books read, "
            f"{timeline.total_books_in_progress} in progress"
        )
        return timeline

    def parse_books(self, all_books: List[Book]) -> List[ParsedBook]:
        return [(book, self.parser.extract(book.title)) for book in all_books]

    # Stage 1

    def collect_numbered(self, parsed: List[ParsedBook]) -> SeriesMap:
        """Group books with an explicit series number by series identity key"""
        series_map: SeriesMap = {}

        for book, info in parsed:
            if not info.is_numbered:
                continue

            key = series_key(info.series_name, book.author)
            series = series_map.get(key)
            if series is None:
                series = SeriesProgress(
                    series_name=info.series_name,
                    author=book.author,
                    normalized_author=normalize_author(book.author),
                )
                series_map[key] = series

            self._upsert(series, self._to_progress(book, info.book_number))

        return series_map

    # Stage 2

    def infer_unnumbered(self, series_map: SeriesMap, parsed: List[ParsedBook]) -> int:
        """
        Place series-tagged books that lack a number.

        Only books published no later than the earliest-published numbered
        book are placed, taking numbers 1..k that are not already occupied.

        Returns:
            Number of books placed
        """
        unnumbered: Dict[SeriesKey, List[Book]] = {}
        for book, info in parsed:
            if not info.is_series or info.book_number is not None:
                continue
            key = series_key(info.series_name, book.author)
            if key in series_map:
                unnumbered.setdefault(key, []).append(book)

        placed = 0
        for key, candidates in unnumbered.items():
            series = series_map[key]
            if not series.books:
                continue

            earliest = min(
                series.books,
                key=lambda entry: entry.publication_year or UNKNOWN_YEAR,
            )
            earliest_year = earliest.publication_year or UNKNOWN_YEAR
            earliest_number = earliest.book_number

            if earliest_number <= 1:
                continue

            candidates = sorted(candidates, key=publication_year_or_unknown)
            before_first = [
                book for book in candidates
                if publication_year_or_unknown(book) <= earliest_year
            ]

            assigned_number = 1
            for book in before_first:
                if series.get_book(assigned_number) is None:
                    self._upsert(series, self._to_progress(book, assigned_number, inferred=True))
                    placed += 1
                    self.logger.debug(
                        f"Inferred '{book.title}' as {series.series_name} #{assigned_number}"
                    )

                assigned_number += 1
                if assigned_number >= earliest_number:
                    break

        return placed

    # Stage 3

    def fill_gaps(self, series_map: SeriesMap, parsed: List[ParsedBook]) -> int:
        """
        Fill numbering gaps with same-author books that have no series marker.

        Candidates must be published between the two books bounding the gap
        (inclusive) and are assigned to the missing numbers in year order.

        Returns:
            Number of books placed
        """
        unmarked_by_author: Dict[str, List[Book]] = {}
        for book, info in parsed:
            if info.is_series or not book.publication_year:
                continue
            unmarked_by_author.setdefault(normalize_author(book.author), []).append(book)

        placed = 0
        for series in series_map.values():
            numbered = sorted(
                (entry for entry in series.books if not entry.inferred),
                key=lambda entry: entry.book_number,
            )
            if len(numbered) < 2:
                continue

            for current, following in zip(numbered, numbered[1:]):
                if following.book_number - current.book_number <= 1:
                    continue

                missing = []
                number = current.book_number + 1
                while number < following.book_number:
                    missing.append(number)
                    number += 1

                low = current.publication_year or UNKNOWN_YEAR
                high = following.publication_year or UNKNOWN_YEAR
                between = sorted(
                    (
                        book for book in unmarked_by_author.get(series.normalized_author, [])
                        if not series.has_title(book.title)
                        and low <= book.publication_year <= high
                    ),
                    key=publication_year_or_unknown,
                )

                for book, assigned_number in zip(between, missing):
                    if series.get_book(assigned_number) is not None:
                        continue
                    self._upsert(series, self._to_progress(book, assigned_number, inferred=True))
                    placed += 1
                    self.logger.debug(
                        f"Gap-filled '{book.title}' as {series.series_name} #{assigned_number}"
                    )

        return placed

    # Stage 4

    def finalize(self, series_map: SeriesMap) -> SeriesProgressionTimeline:
        """Compute statistics, drop unstarted and completed series, and sort"""
        result: List[SeriesProgress] = []
        total_read = 0
        total_in_progress = 0

        for series in series_map.values():
            series.books.sort(key=lambda entry: entry.book_number)
            if not series.books:
                continue

            first_book = series.get_book(1) or series.books[0]
            if not first_book.status.is_started:
                self.logger.debug(f"Skipping {series.series_name}: first book not started")
                continue

            self._compute_statistics(series)

            if (series.books_read == len(series.books)
                    and series.books_in_progress == 0
                    and series.books_to_read == 0):
                self.logger.debug(f"Skipping {series.series_name}: completed")
                continue

            total_read += series.books_read
            total_in_progress += series.books_in_progress
            result.append(series)

        result.sort(key=self._sort_key)

        return SeriesProgressionTimeline(
            series=result,
            total_series=len(result),
            total_books_read=total_read,
            total_books_in_progress=total_in_progress,
        )

    def _compute_statistics(self, series: SeriesProgress) -> None:
        books = series.books
        series.books_read = sum(1 for b in books if b.status == BookStatus.READ)
        series.books_in_progress = sum(1 for b in books if b.status.is_in_progress)
        series.books_to_read = sum(1 for b in books if b.status == BookStatus.TO_READ)
        series.highest_book_number = max(b.book_number for b in books)

        # Distinct tracked books, not the highest number: numbering can be sparse
        series.completion_percentage = min(series.books_read / len(books) * 100, 100.0)

        read_dates = sorted(
            b.date_read for b in books if b.status == BookStatus.READ and b.date_read
        )
        if read_dates:
            series.first_read_date = read_dates[0]
            series.last_read_date = read_dates[-1]

        reading = [b.book_number for b in books if b.status == BookStatus.CURRENTLY_READING]
        series.current_book_number = min(reading) if reading else None

    @staticmethod
    def _sort_key(series: SeriesProgress):
        if series.last_read_date:
            return (0, -series.last_read_date.toordinal(), series.series_name.casefold())
        return (1, 0, series.series_name.casefold())

    @staticmethod
    def _to_progress(book: Book, book_number: float, inferred: bool = False) -> BookProgress:
        status = BookStatus.from_shelf(book.shelf)
        return BookProgress(
            title=book.title,
            book_number=book_number,
            status=status,
            author=book.author,
            date_read=book.date_read if status == BookStatus.READ else None,
            publication_year=book.publication_year,
            inferred=inferred,
        )

    @staticmethod
    def _upsert(series: SeriesProgress, entry: BookProgress) -> None:
        """
        Add an entry, resolving number collisions by status priority:
        in progress beats read, read beats everything else.
        """
        for index, existing in enumerate(series.books):
            if existing.book_number != entry.book_number:
                continue
            new_rank = _status_rank(entry.status)
            if new_rank > 0 and new_rank >= _status_rank(existing.status):
                series.books[index] = entry
            return

        series.books.append(entry)
        if entry.book_number > series.highest_book_number:
            series.highest_book_number = entry.book_number
