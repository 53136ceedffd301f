"""
Series name and book number extraction from free-text titles.

Goodreads appends series information to titles in a handful of shapes.
Each shape is a TitlePattern; patterns are tried in a fixed order and the
first one that matches wins.
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Optional, Pattern

from ..models.book import SeriesInfo
from ..models.progress import SeriesKey

logger = logging.getLogger(__name__)

SERIES_KEYWORDS = re.compile(r"\b(series|saga|chronicles|trilogy|cycle|book)\b", re.IGNORECASE)
MAX_SHORT_SERIES_LENGTH = 20

_NUMBER = r"(\d+(?:\.\d+)?)"


def looks_like_series(name: str) -> bool:
    """
    Decide whether an unnumbered parenthetical or colon prefix is a series name.

    Accepts names containing a series keyword, or short names without commas.
    Long descriptive subtitles are rejected.
    """
    if SERIES_KEYWORDS.search(name):
        return True

    return len(name) <= MAX_SHORT_SERIES_LENGTH and "," not in name


def normalize_author(author: str) -> str:
    """Lowercase, trim and collapse whitespace so author names compare reliably"""
    return re.sub(r"\s+", " ", (author or "").strip().lower())


def series_key(series_name: str, author: str) -> SeriesKey:
    """Identity key for a series: case-insensitive name plus normalized author"""
    return (series_name.lower(), normalize_author(author))


@dataclass(frozen=True)
class TitlePattern:
    """One title shape: where the series name and number live in the match"""
    name: str
    regex: Pattern
    series_group: int
    number_group: Optional[int] = None
    requires_series_check: bool = False

    def match(self, title: str) -> Optional[SeriesInfo]:
        found = self.regex.match(title)
        if not found:
            return None

        series_name = found.group(self.series_group).strip()
        if not series_name:
            return None
        if self.requires_series_check and not looks_like_series(series_name):
            return None

        book_number = float(found.group(self.number_group)) if self.number_group else None
        return SeriesInfo(series_name=series_name, book_number=book_number)


TITLE_PATTERNS: List[TitlePattern] = [
    # "Cross Fire (Alex Cross, #17)" / "The Hunger Games (The Hunger Games #1)"
    TitlePattern(
        name="parenthetical_hash",
        regex=re.compile(r"^(.+?)\s*\((.+?),?\s*#" + _NUMBER + r"\)", re.IGNORECASE),
        series_group=2,
        number_group=3,
    ),
    # "Book Title (Series Name, Book 3)"
    TitlePattern(
        name="parenthetical_book",
        regex=re.compile(r"^(.+?)\s*\((.+?),?\s+(?:Book\s+)?" + _NUMBER + r"\)", re.IGNORECASE),
        series_group=2,
        number_group=3,
    ),
    # "Alex Cross #1" / "Alex Cross #1: Along Came a Spider"
    TitlePattern(
        name="leading_hash",
        regex=re.compile(r"^(.+?)\s*#" + _NUMBER + r"(?::\s*(.+))?", re.IGNORECASE),
        series_group=1,
        number_group=2,
    ),
    # "Some Book (Cool Series)"
    TitlePattern(
        name="parenthetical_name",
        regex=re.compile(r"^(.+?)\s*\((.+?)\)$", re.IGNORECASE),
        series_group=2,
        requires_series_check=True,
    ),
    # "Harry Potter: The Chamber of Secrets"
    TitlePattern(
        name="colon_prefix",
        regex=re.compile(r"^(.+?):\s*(.+)"),
        series_group=1,
        requires_series_check=True,
    ),
]


class TitleParser:
    """
    Extracts SeriesInfo from book titles.

    Never raises: titles that match no pattern are standalone books.
    """

    def __init__(self, patterns: Optional[List[TitlePattern]] = None):
        self.patterns = patterns if patterns is not None else TITLE_PATTERNS

    def extract(self, title: str) -> SeriesInfo:
        if not title:
            return SeriesInfo()

        for pattern in self.patterns:
            info = pattern.match(title)
            if info:
                logger.debug(f"'{title}' matched {pattern.name}: {info}")
                return info

        return SeriesInfo()


_default_parser = TitleParser()


def extract_series_info(title: str) -> SeriesInfo:
    """Parse a title with the default pattern list"""
    return _default_parser.extract(title)
