"""
Active series detection.

A series is active when the reader has an inferred current position in it.
Several shelf signals are merged so that a series with nothing shelved as
currently-reading (e.g. books 1-7 read, none queued) is still picked up.
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from ..models.book import Book, Shelf
from ..models.progress import ActiveSeries, SeriesKey, SeriesProgressionTimeline
from ..sources.base import BookSource
from .timeline import SeriesTimelineBuilder
from .title_parser import TitleParser, normalize_author, series_key

# Books read in the reference year or the year before count as recent
RECENT_READ_WINDOW_YEARS = 1


class ActiveSeriesDetector:
    """
    Merges currently-reading, recently-read, reading-next and incomplete
    timeline series into one list of ActiveSeries.

    Args:
        reference_date: "Today" for the recency window; defaults to date.today()
        timeline_builder: Builder used for the incomplete-series signal
    """

    def __init__(
        self,
        reference_date: Optional[date] = None,
        parser: Optional[TitleParser] = None,
        timeline_builder: Optional[SeriesTimelineBuilder] = None,
        recent_window_years: int = RECENT_READ_WINDOW_YEARS,
    ):
        self.reference_date = reference_date
        self.parser = parser or TitleParser()
        self.timeline_builder = timeline_builder or SeriesTimelineBuilder(self.parser)
        self.recent_window_years = recent_window_years
        self.logger = logging.getLogger(self.__class__.__name__)

    def detect(
        self,
        source: BookSource,
        timeline: Optional[SeriesProgressionTimeline] = None,
    ) -> List[ActiveSeries]:
        """
        Detect active series from a book source.

        Args:
            source: Collaborator providing the library records
            timeline: Already-built timeline for the same source; built here if omitted

        Returns:
            One ActiveSeries per (series, author), in discovery order
        """
        currently_reading = source.load_books_by_shelf(Shelf.CURRENTLY_READING)
        read_books = source.load_books_by_shelf(Shelf.READ)
        reading_next = source.load_books_by_shelf(Shelf.READING_NEXT)
        if timeline is None:
            timeline = self.timeline_builder.build(source.load_books())

        return self.detect_from_shelves(currently_reading, read_books, reading_next, timeline)

    def detect_from_shelves(
        self,
        currently_reading: List[Book],
        read_books: List[Book],
        reading_next: List[Book],
        timeline: Optional[SeriesProgressionTimeline] = None,
    ) -> List[ActiveSeries]:
        active: Dict[SeriesKey, ActiveSeries] = {}

        for book in currently_reading:
            self._add_currently_reading(active, book)

        recent = [book for book in read_books if self.is_recent(book)]
        for book in recent:
            self._add_recently_read(active, book)

        for book in reading_next:
            self._add_reading_next(active, book)

        if timeline is not None:
            self._add_incomplete_series(active, timeline)

        self.logger.info(f"Found {len(active)} active series")
        for series in active.values():
            self.logger.debug(
                f"{series.series_name} by {series.author} "
                f"(currently on book {series.current_book_number:g})"
            )
        return list(active.values())

    def reference_year(self) -> int:
        return (self.reference_date or date.today()).year

    def is_recent(self, book: Book) -> bool:
        """True when the book was read within the recency window"""
        if not book.date_read:
            return False
        return self.reference_year() - book.date_read.year <= self.recent_window_years

    def _numbered(self, book: Book):
        info = self.parser.extract(book.title)
        return info if info.is_numbered else None

    def _new_entry(self, book: Book, series_name: str, book_number: float) -> ActiveSeries:
        return ActiveSeries(
            series_name=series_name,
            author=book.author,
            current_book=book.title,
            current_book_number=book_number,
            normalized_author=normalize_author(book.author),
        )

    def _add_currently_reading(self, active: Dict[SeriesKey, ActiveSeries], book: Book) -> None:
        info = self._numbered(book)
        if not info:
            return

        key = series_key(info.series_name, book.author)
        existing = active.get(key)
        if existing is None:
            active[key] = self._new_entry(book, info.series_name, info.book_number)
        elif info.book_number < existing.current_book_number:
            # Two books of one series in progress: track the earlier one
            existing.current_book = book.title
            existing.current_book_number = info.book_number

    def _add_recently_read(self, active: Dict[SeriesKey, ActiveSeries], book: Book) -> None:
        info = self._numbered(book)
        if not info:
            return

        key = series_key(info.series_name, book.author)
        existing = active.get(key)
        if existing is None:
            active[key] = self._new_entry(book, info.series_name, info.book_number)
        elif info.book_number > existing.current_book_number:
            existing.current_book = book.title
            existing.current_book_number = info.book_number

    def _add_reading_next(self, active: Dict[SeriesKey, ActiveSeries], book: Book) -> None:
        info = self._numbered(book)
        if not info:
            return

        key = series_key(info.series_name, book.author)
        if key not in active:
            active[key] = self._new_entry(book, info.series_name, info.book_number)

    def _add_incomplete_series(
        self,
        active: Dict[SeriesKey, ActiveSeries],
        timeline: SeriesProgressionTimeline,
    ) -> None:
        for series in timeline.series:
            if series.books_to_read == 0 and series.books_in_progress == 0:
                continue

            highest_read = series.highest_read_book()
            existing = active.get(series.key)

            if existing is None:
                marker = highest_read
                if marker is None:
                    in_progress = [b for b in series.books if b.status.is_in_progress]
                    marker = in_progress[0] if in_progress else None
                if marker is None:
                    continue

                active[series.key] = ActiveSeries(
                    series_name=series.series_name,
                    author=series.author,
                    current_book=marker.title,
                    current_book_number=marker.book_number,
                    normalized_author=series.normalized_author,
                )
            elif highest_read and highest_read.book_number > existing.current_book_number:
                existing.current_book = highest_read.title
                existing.current_book_number = highest_read.book_number
