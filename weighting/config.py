"""
Runtime configuration read from environment variables.
"""

import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class WeightingConfig:
    csv_path: str = "data/goodreads_library_export.csv"
    output_dir: str = "weighting_data"
    log_level: str = "INFO"
    reference_date: Optional[date] = None

    @classmethod
    def from_env(cls) -> "WeightingConfig":
        reference = os.environ.get("WEIGHTING_REFERENCE_DATE", "").strip()
        return cls(
            csv_path=os.environ.get("WEIGHTING_CSV_PATH", cls.csv_path),
            output_dir=os.environ.get("WEIGHTING_OUTPUT_DIR", cls.output_dir),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
            reference_date=date.fromisoformat(reference) if reference else None,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
