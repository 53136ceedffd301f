"""
Weighting pipeline: CSV -> Active Series -> Weights -> Curated Set -> Export

Ties the series engine to a book source and the exporter:
1. Load the to-read shelf and the full collection
2. Detect active series and weight to-read books
3. Select the curated "read now" set
4. Build the progression timeline
5. Export everything to JSON (and optionally a CSV table)
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from ..models.book import Book, CuratedBook, WeightedBook
from ..models.progress import SeriesProgressionTimeline
from ..scoring.classifier import ContinuationClassifier
from ..scoring.curation import CuratedSetSelector
from ..scoring.weights import STANDARD_WEIGHT, WeightAssigner, weight_distribution
from ..series.active import ActiveSeriesDetector
from ..series.timeline import SeriesTimelineBuilder
from ..series.title_parser import TitleParser
from ..sources.base import BookSource
from ..sources.goodreads_csv import GoodreadsCSVSource
from .exporter import WeightingExporter

ProgressCallback = Callable[[str], None]


class BookWeightingPipeline:
    """
    Entry point for the surrounding application.

    Every call reprocesses the whole collection from the source; nothing is
    cached between calls except what the source itself holds.
    """

    def __init__(self, reference_date: Optional[date] = None, output_dir: str = "weighting_data"):
        parser = TitleParser()
        self.timeline_builder = SeriesTimelineBuilder(parser)
        self.detector = ActiveSeriesDetector(
            reference_date=reference_date,
            parser=parser,
            timeline_builder=self.timeline_builder,
        )
        classifier = ContinuationClassifier(parser)
        self.weight_assigner = WeightAssigner(classifier)
        self.selector = CuratedSetSelector(classifier)
        self.exporter = WeightingExporter(output_dir=output_dir)
        self.logger = logging.getLogger(self.__class__.__name__)

    def compute_weighted_books(self, to_read_books: List[Book], source: BookSource) -> List[WeightedBook]:
        active_series = self.detector.detect(source)
        return self.weight_assigner.assign(to_read_books, active_series)

    def build_timeline(self, source: BookSource) -> SeriesProgressionTimeline:
        return self.timeline_builder.build(source.load_books())

    def select_curated_set(self, weighted_books: List[WeightedBook], source: BookSource) -> List[CuratedBook]:
        active_series = self.detector.detect(source)
        return self.selector.select(weighted_books, active_series, source.load_books())

    def run(
        self,
        source: BookSource,
        output_path: Optional[str] = None,
        table_path: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Dict[str, Any]:
        """
        Complete pipeline: source to exported weighting results.

        Args:
            source: Book source for the whole library
            output_path: JSON destination (if None, generates UUID filename)
            table_path: Optional CSV table destination
            progress_callback: Receives human-readable stage messages

        Returns:
            Result summary with the weighted books, curated set and export path
        """
        def progress(message: str) -> None:
            self.logger.info(message)
            if progress_callback:
                progress_callback(message)

        progress("📖 Reading to-read books...")
        to_read_books = source.get_to_read_books()
        all_books = source.load_books()
        progress(f"   Found {len(to_read_books)} books on your to-read shelf")

        progress("🧠 Analyzing active series and applying weights...")
        timeline = self.timeline_builder.build(all_books)
        active_series = self.detector.detect(source, timeline)
        weighted_books = self.weight_assigner.assign(to_read_books, active_series)

        distribution = weight_distribution(weighted_books)
        progress("📊 Weight distribution: " + ", ".join(
            f"{weight}x weight: {count} books" for weight, count in distribution.items()
        ))

        high_priority = [wb for wb in weighted_books if wb.weight > STANDARD_WEIGHT]
        if high_priority:
            progress(f"🎯 Found {len(high_priority)} high-priority books (series continuations)")

        curated_books = self.selector.select(weighted_books, active_series, all_books)

        progress("📤 Exporting weighting results...")
        export_data = self.exporter.export_to_json(
            weighted_books,
            curated_books=curated_books,
            active_series=active_series,
            timeline=timeline,
            output_path=output_path,
        )
        validation = self.exporter.validate_export(export_data)
        if not validation["is_valid"]:
            raise ValueError(f"Export validation failed: {validation['issues']}")

        if table_path:
            self.exporter.export_weighted_books_csv(weighted_books, table_path)

        progress("✅ Sync complete!")

        return {
            "total_books": len(weighted_books),
            "high_priority_books": high_priority,
            "weight_distribution": distribution,
            "weighted_books": weighted_books,
            "curated_books": curated_books,
            "active_series": active_series,
            "timeline": timeline,
            "export_path": export_data["export_path"],
            "table_path": table_path,
        }


def compute_weighted_books(
    to_read_books: List[Book],
    source: BookSource,
    reference_date: Optional[date] = None,
) -> List[WeightedBook]:
    return BookWeightingPipeline(reference_date).compute_weighted_books(to_read_books, source)


def build_timeline(source: BookSource) -> SeriesProgressionTimeline:
    return BookWeightingPipeline().build_timeline(source)


def select_curated_set(
    weighted_books: List[WeightedBook],
    source: BookSource,
    reference_date: Optional[date] = None,
) -> List[CuratedBook]:
    return BookWeightingPipeline(reference_date).select_curated_set(weighted_books, source)


def quick_pipeline(
    csv_path: str,
    output_path: Optional[str] = None,
    reference_date: Optional[date] = None,
    output_dir: str = "weighting_data",
) -> str:
    """
    Quick convenience function: weight a Goodreads export and save JSON.

    Returns:
        Path to created JSON file
    """
    pipeline = BookWeightingPipeline(reference_date=reference_date, output_dir=output_dir)
    result = pipeline.run(GoodreadsCSVSource(csv_path), output_path=output_path)
    return result["export_path"]
