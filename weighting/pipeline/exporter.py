"""
Weighted-book exporter.

Workflow: CSV -> Active Series -> Weights -> Curated Set -> JSON / CSV table
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Any, Optional

import pandas as pd

from ..models.book import CuratedBook, WeightedBook
from ..models.progress import ActiveSeries, SeriesProgressionTimeline
from ..scoring.weights import STANDARD_WEIGHT, weight_distribution

# Column layout of the selection-wheel sheet
TABLE_COLUMNS = ["Book Title by Author", "Bookshelves", "Weight", "Reason"]


class WeightingExporter:
    """
    Exports weighting results for the selection wheel.

    The JSON document includes:
    - Every weighted to-read book
    - The curated "read now" set
    - Active series and the progression timeline
    - Summary statistics and export metadata
    """

    def __init__(self, output_dir: str = "weighting_data"):
        self.output_dir = output_dir
        self.logger = logging.getLogger(self.__class__.__name__)

    def export_to_json(
        self,
        weighted_books: List[WeightedBook],
        curated_books: Optional[List[CuratedBook]] = None,
        active_series: Optional[List[ActiveSeries]] = None,
        timeline: Optional[SeriesProgressionTimeline] = None,
        output_path: Optional[str] = None,
        include_metadata: bool = True,
    ) -> Dict[str, Any]:
        """
        Export weighting results to JSON.

        Args:
            weighted_books: Weighted to-read books
            curated_books: Curated subset, if computed
            active_series: Detected active series, if computed
            timeline: Series progression timeline, if computed
            output_path: Where to save the JSON file (if None, generates UUID filename)
            include_metadata: Whether to include export metadata

        Returns:
            Dictionary containing the exported data structure with 'export_path' added
        """
        export_uuid = str(uuid.uuid4())

        if output_path is None:
            output_path = f"{self.output_dir}/{export_uuid}.json"

        self.logger.info(f"Exporting {len(weighted_books)} weighted books to {output_path}")

        curated_books = curated_books or []
        export_data = {
            "export_id": export_uuid,
            "weighted_books": [wb.to_dict() for wb in weighted_books],
            "curated_books": [cb.to_dict() for cb in curated_books],
            "active_series": [s.to_dict() for s in (active_series or [])],
            "timeline": timeline.to_dict() if timeline else None,
            "summary": self._generate_summary_stats(weighted_books, curated_books, timeline),
        }

        if include_metadata:
            export_data["metadata"] = self._generate_metadata(export_uuid)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(export_data, f, indent=2, ensure_ascii=False, default=str)

        summary = export_data["summary"]
        self.logger.info(f"Export ID: {export_uuid}")
        self.logger.info(f"Export summary: {summary['total_books']} books, "
                         f"{summary['high_priority_books']} high priority, "
                         f"{summary['curated_books']} curated")

        export_data["export_path"] = str(output_path)
        return export_data

    def export_weighted_books_csv(self, weighted_books: List[WeightedBook], output_path: str) -> str:
        """
        Write the weighted books as a four-column table.

        Returns:
            Path to the written CSV
        """
        rows = [
            {
                "Book Title by Author": f"{wb.book.title} by {wb.book.author}",
                "Bookshelves": wb.book.bookshelves,
                "Weight": wb.weight,
                "Reason": wb.reason,
            }
            for wb in weighted_books
        ]
        df = pd.DataFrame(rows, columns=TABLE_COLUMNS)

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)

        self.logger.info(f"Wrote {len(df)} weighted books to {path}")
        return str(path)

    def _generate_summary_stats(
        self,
        weighted_books: List[WeightedBook],
        curated_books: List[CuratedBook],
        timeline: Optional[SeriesProgressionTimeline],
    ) -> Dict[str, Any]:
        distribution = weight_distribution(weighted_books)
        curated_types: Dict[str, int] = {}
        for cb in curated_books:
            curated_types[cb.book_type.value] = curated_types.get(cb.book_type.value, 0) + 1

        return {
            "total_books": len(weighted_books),
            "high_priority_books": sum(1 for wb in weighted_books if wb.weight > STANDARD_WEIGHT),
            "weight_distribution": {str(weight): count for weight, count in distribution.items()},
            "curated_books": len(curated_books),
            "curated_book_types": curated_types,
            "active_series_in_timeline": timeline.total_series if timeline else 0,
        }

    def _generate_metadata(self, export_id: str) -> Dict[str, Any]:
        return {
            "export_id": export_id,
            "export_timestamp": datetime.now().isoformat(),
            "exporter_version": "1.0.0",
            "data_schema_version": "1.0.0",
            "export_source": "goodreads_csv_series_weighting",
            "processing_notes": [
                "Next book in an active series weighted 5, everything else 1",
                "Series detected heuristically from titles",
                "Progressive sub-series gate book #1 of their base series",
            ],
        }

    def validate_export(self, export_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate the exported data structure.

        Returns:
            Validation report with any issues found
        """
        issues = []
        warnings = []

        for key in ["weighted_books", "summary"]:
            if key not in export_data:
                issues.append(f"Missing required key: {key}")

        books = export_data.get("weighted_books", [])
        if not isinstance(books, list):
            issues.append("'weighted_books' should be an array")
        else:
            for i, book in enumerate(books):
                for field in ["title", "author", "weight", "reason"]:
                    if field not in book:
                        issues.append(f"Book {i} missing required field: {field}")
                weight = book.get("weight")
                if isinstance(weight, int) and weight < 1:
                    issues.append(f"Book {i} has invalid weight: {weight}")

            if not books:
                warnings.append("No to-read books were exported")

        return {
            "is_valid": len(issues) == 0,
            "issues": issues,
            "warnings": warnings,
            "book_count": len(books) if isinstance(books, list) else 0,
        }


def create_weighting_json(
    weighted_books: List[WeightedBook],
    curated_books: Optional[List[CuratedBook]] = None,
    active_series: Optional[List[ActiveSeries]] = None,
    timeline: Optional[SeriesProgressionTimeline] = None,
    output_path: Optional[str] = None,
    output_dir: str = "weighting_data",
) -> str:
    """
    Convenience function to export and validate weighting results.

    Returns:
        Path to the created JSON file
    """
    exporter = WeightingExporter(output_dir=output_dir)
    export_data = exporter.export_to_json(
        weighted_books, curated_books, active_series, timeline, output_path
    )

    validation = exporter.validate_export(export_data)

    if not validation["is_valid"]:
        raise ValueError(f"Export validation failed: {validation['issues']}")

    if validation["warnings"]:
        logger = logging.getLogger(__name__)
        for warning in validation["warnings"]:
            logger.warning(warning)

    return export_data["export_path"]
