"""
Plain-text rendering of a series progression timeline.
"""

import math
from typing import List

from ..models.progress import BookProgress, BookStatus, SeriesProgress, SeriesProgressionTimeline

STATUS_ICONS = {
    BookStatus.READ: "✅",
    BookStatus.CURRENTLY_READING: "📖",
    BookStatus.READING_NEXT: "🔜",
    BookStatus.TO_READ: "📚",
    BookStatus.NOT_STARTED: "⚪",
}

STATUS_TEXT = {
    BookStatus.READ: "Read",
    BookStatus.CURRENTLY_READING: "Currently Reading",
    BookStatus.READING_NEXT: "Reading Next",
    BookStatus.TO_READ: "To Read",
    BookStatus.NOT_STARTED: "Not Started",
}


def format_number(number: float) -> str:
    """17.0 -> '17', 1.5 -> '1.5'"""
    return f"{number:g}"


def is_adjacent(previous: float, current: float) -> bool:
    """
    Whether two book numbers are consecutive for display grouping.

    A step of 1, a 0.1 step after a fractional number, or a 0.5 step inside
    the same whole number.
    """
    diff = current - previous
    if math.isclose(diff, 1):
        return True
    if math.isclose(diff, 0.1) and previous % 1 != 0:
        return True
    return math.isclose(diff, 0.5) and math.floor(previous) == math.floor(current)


def group_books(books: List[BookProgress]) -> List[List[BookProgress]]:
    """Collapse runs of adjacent books that share a status"""
    groups: List[List[BookProgress]] = []

    for book in books:
        if groups:
            previous = groups[-1][-1]
            if previous.status == book.status and is_adjacent(previous.book_number, book.book_number):
                groups[-1].append(book)
                continue
        groups.append([book])

    return groups


class TimelineFormatter:
    """Formats a SeriesProgressionTimeline for console output"""

    def format_timeline(self, timeline: SeriesProgressionTimeline) -> str:
        lines = ["", "📈 Series Progression Timeline", "=" * 37, ""]

        if not timeline.series:
            lines.append("   No series found in your library.")
            lines.append("")
            return "\n".join(lines)

        lines.append("📊 Overview:")
        lines.append(f"   • Total Series: {timeline.total_series}")
        lines.append(f"   • Books Read: {timeline.total_books_read}")
        lines.append(f"   • Books In Progress: {timeline.total_books_in_progress}")
        lines.append("")

        for index, series in enumerate(timeline.series, 1):
            lines.append(self.format_series(series, index))
            lines.append("")

        return "\n".join(lines)

    def format_series(self, series: SeriesProgress, index: int) -> str:
        lines = [
            f"{index}. {series.series_name} by {series.author}",
            f"   Progress: {series.books_read} read, {series.books_in_progress} in progress, "
            f"{series.books_to_read} to read",
            f"   Completion: {series.completion_percentage:.1f}%",
        ]

        if series.current_book_number is not None:
            lines.append(f"   Currently on: Book #{format_number(series.current_book_number)}")

        if series.first_read_date and series.last_read_date:
            first = series.first_read_date.isoformat()
            last = series.last_read_date.isoformat()
            lines.append(f"   Dates: {first}" if first == last else f"   Dates: {first} - {last}")

        if series.books:
            lines.append("   Timeline:")
            for group in group_books(series.books):
                lines.extend(self._format_group(group))

        return "\n".join(lines)

    def _format_group(self, group: List[BookProgress]) -> List[str]:
        first, last = group[0], group[-1]
        icon = STATUS_ICONS[first.status]
        text = STATUS_TEXT[first.status]

        if len(group) > 1:
            return [
                f"      {icon} Books #{format_number(first.book_number)}-"
                f"#{format_number(last.book_number)}: {text}"
            ]

        date_str = f" ({first.date_read.isoformat()})" if first.date_read else ""
        return [f"      {icon} Book #{format_number(first.book_number)}: {text}{date_str}"]
