"""Shared fixtures for the weighting tests."""

from datetime import date

import pytest

from weighting.models import Book


def _make_book(title, author="Test Author", shelf="to-read", date_read=None, year=None, **kwargs):
    if isinstance(date_read, str):
        date_read = date.fromisoformat(date_read)
    return Book(
        title=title,
        author=author,
        exclusive_shelf=shelf,
        date_read=date_read,
        original_publication_year=year,
        **kwargs,
    )


@pytest.fixture
def make_book():
    """Factory for Book records with sensible defaults."""
    return _make_book


@pytest.fixture
def reference_date():
    """Fixed 'today' so recency decisions do not depend on the wall clock."""
    return date(2025, 10, 1)


@pytest.fixture
def goodreads_csv(tmp_path):
    """Write CSV content to a temporary export file and return its path."""
    def _write(lines):
        path = tmp_path / "goodreads_library_export.csv"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write
