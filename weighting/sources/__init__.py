"""
Book record sources for the weighting engine.
"""

from .base import BookSource
from .memory import InMemoryBookSource
from .goodreads_csv import GoodreadsCSVSource

__all__ = [
    "BookSource",
    "InMemoryBookSource",
    "GoodreadsCSVSource",
]
