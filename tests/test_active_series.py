"""Unit tests for active series detection."""

from datetime import date

import pytest

from weighting.models import SeriesProgressionTimeline
from weighting.series import ActiveSeriesDetector
from weighting.sources import InMemoryBookSource


@pytest.fixture
def detector(reference_date):
    return ActiveSeriesDetector(reference_date=reference_date)


def by_name(active):
    return {series.series_name: series for series in active}


class TestShelfSignals:
    """Currently-reading and reading-next detection."""

    def test_currently_reading_and_reading_next(self, detector, make_book):
        """Should detect one active series per shelf signal."""
        source = InMemoryBookSource([
            make_book("Witch's Dawn (Unholy Trinity, #1)", author="Nicole Marsh", shelf="currently-reading"),
            make_book("Cross Fire (Alex Cross, #17)", author="James Patterson", shelf="currently-reading"),
            make_book("The Never Game (Colter Shaw, #1)", author="Jeffery Deaver", shelf="reading-next"),
        ])
        active = by_name(detector.detect(source))

        assert set(active) == {"Unholy Trinity", "Alex Cross", "Colter Shaw"}
        assert active["Alex Cross"].current_book_number == 17
        assert active["Alex Cross"].current_book == "Cross Fire (Alex Cross, #17)"
        assert active["Colter Shaw"].current_book_number == 1

    def test_reading_next_does_not_override_currently_reading(self, detector, make_book):
        """Should keep the currently-reading position for a series on both shelves."""
        source = InMemoryBookSource([
            make_book("Witch's Dawn (Unholy Trinity, #1)", shelf="currently-reading"),
            make_book("Witch's Twilight (Unholy Trinity, #2)", shelf="reading-next"),
        ])
        active = detector.detect(source)

        assert len(active) == 1
        assert active[0].current_book_number == 1

    def test_standalone_books_ignored(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("Some Random Book Title", shelf="currently-reading"),
            make_book("Another Standalone", shelf="reading-next"),
        ])
        assert detector.detect(source) == []

    def test_two_in_progress_keeps_lower_number(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("Three (Test Series, #3)", shelf="currently-reading"),
            make_book("Two (Test Series, #2)", shelf="currently-reading"),
        ])
        active = detector.detect(source)
        assert len(active) == 1
        assert active[0].current_book_number == 2

    def test_series_keyed_by_author(self, detector, make_book):
        """Should treat same-named series by different authors as separate."""
        source = InMemoryBookSource([
            make_book("One (Shared Name, #1)", author="Author A", shelf="currently-reading"),
            make_book("Four (Shared Name, #4)", author="Author B", shelf="currently-reading"),
        ])
        active = detector.detect(source)
        assert sorted(series.current_book_number for series in active) == [1, 4]


class TestRecentlyRead:
    """Recently-read detection relative to the reference date."""

    def test_recent_reads_start_series(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("Witch's Dawn (Unholy Trinity, #1)", shelf="read", date_read="2025-08-17"),
            make_book("Cat & Mouse (Alex Cross, #6)", author="James Patterson", shelf="read",
                      date_read="2025-08-14"),
        ])
        active = by_name(detector.detect(source))

        assert set(active) == {"Unholy Trinity", "Alex Cross"}
        assert active["Alex Cross"].current_book_number == 6

    def test_previous_year_is_recent(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("One (Test Series, #1)", shelf="read", date_read="2024-01-05"),
        ])
        assert len(detector.detect(source)) == 1

    def test_two_years_ago_is_not_recent(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("One (Test Series, #1)", shelf="read", date_read="2023-12-31"),
        ])
        assert detector.detect(source) == []

    def test_read_without_date_is_not_recent(self, detector, make_book):
        assert not detector.is_recent(make_book("One (Test Series, #1)", shelf="read"))

    def test_recent_read_moves_position_forward(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("Three (Test Series, #3)", shelf="currently-reading"),
            make_book("Five (Test Series, #5)", shelf="read", date_read="2025-03-01"),
        ])
        active = detector.detect(source)
        assert active[0].current_book_number == 5
        assert active[0].current_book == "Five (Test Series, #5)"

    def test_recent_read_never_moves_position_back(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("Three (Test Series, #3)", shelf="currently-reading"),
            make_book("Two (Test Series, #2)", shelf="read", date_read="2025-03-01"),
        ])
        active = detector.detect(source)
        assert active[0].current_book_number == 3

    def test_reading_next_does_not_override_recent_read(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("Four (Test Series, #4)", shelf="read", date_read="2025-03-01"),
            make_book("Seven (Test Series, #7)", shelf="reading-next"),
        ])
        active = detector.detect(source)
        assert active[0].current_book_number == 4

    def test_window_is_configurable(self, make_book):
        detector = ActiveSeriesDetector(reference_date=date(2025, 10, 1), recent_window_years=3)
        assert detector.is_recent(make_book("One (Test Series, #1)", shelf="read", date_read="2022-06-01"))


class TestIncompleteSeries:
    """Series picked up from the timeline without a recent shelf signal."""

    def test_old_reads_with_unread_books(self, detector, make_book):
        """Should track the highest read book of a started, unfinished series."""
        source = InMemoryBookSource([
            make_book("One (Test Series, #1)", shelf="read", date_read="2019-01-01"),
            make_book("Two (Test Series, #2)", shelf="read", date_read="2019-02-01"),
            make_book("Three (Test Series, #3)", shelf="read", date_read="2019-03-01"),
            make_book("Four (Test Series, #4)"),
        ])
        active = detector.detect(source)

        assert len(active) == 1
        assert active[0].current_book_number == 3
        assert active[0].current_book == "Three (Test Series, #3)"

    def test_inferred_in_progress_book_used_when_nothing_read(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("The Opening (Test Saga)", shelf="currently-reading", year=2011),
            make_book("Book Two (Test Saga, #2)", year=2012),
        ])
        active = detector.detect(source)

        assert len(active) == 1
        assert active[0].current_book_number == 1
        assert active[0].current_book == "The Opening (Test Saga)"

    def test_highest_read_moves_position_forward(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("One (Test Series, #1)", shelf="read", date_read="2019-01-01"),
            make_book("Two (Test Series, #2)", shelf="currently-reading"),
            make_book("Three (Test Series, #3)", shelf="read", date_read="2019-03-01"),
            make_book("Four (Test Series, #4)", shelf="read", date_read="2019-04-01"),
            make_book("Five (Test Series, #5)"),
        ])
        active = detector.detect(source)
        assert active[0].current_book_number == 4

    def test_finished_series_not_active(self, detector, make_book):
        source = InMemoryBookSource([
            make_book("One (Test Series, #1)", shelf="read", date_read="2019-01-01"),
            make_book("Two (Test Series, #2)", shelf="read", date_read="2019-02-01"),
        ])
        assert detector.detect(source) == []

    def test_detect_from_shelves_without_timeline(self, detector, make_book):
        books = [
            make_book("One (Test Series, #1)", shelf="read", date_read="2019-01-01"),
            make_book("Two (Test Series, #2)"),
        ]
        assert detector.detect_from_shelves([], books[:1], []) == []

    def test_detect_uses_supplied_timeline(self, detector, make_book):
        """Should take incomplete series from the given timeline instead of rebuilding it."""
        source = InMemoryBookSource([
            make_book("One (Test Series, #1)", shelf="read", date_read="2019-01-01"),
            make_book("Two (Test Series, #2)"),
        ])
        assert detector.detect(source, SeriesProgressionTimeline()) == []
        assert len(detector.detect(source)) == 1
