#!/usr/bin/env python3
"""
Print the series progression timeline for a Goodreads export.

Usage: python run_timeline.py [path/to/goodreads_library_export.csv]
"""

import sys

from weighting import GoodreadsCSVSource, TimelineFormatter, build_timeline
from weighting.config import WeightingConfig, configure_logging


def main() -> int:
    config = WeightingConfig.from_env()
    configure_logging(config.log_level)

    csv_path = sys.argv[1] if len(sys.argv) > 1 else config.csv_path

    timeline = build_timeline(GoodreadsCSVSource(csv_path))
    print(TimelineFormatter().format_timeline(timeline))
    return 0


if __name__ == "__main__":
    sys.exit(main())
