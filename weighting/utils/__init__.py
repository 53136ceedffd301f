"""
Display helpers.
"""

from .timeline_formatter import TimelineFormatter, format_number, group_books, is_adjacent

__all__ = [
    "TimelineFormatter",
    "format_number",
    "group_books",
    "is_adjacent",
]
