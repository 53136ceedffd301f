#!/usr/bin/env python3
"""
Weight a Goodreads export for the book selection wheel.

Usage: python run_weighting.py [path/to/goodreads_library_export.csv]
"""

import sys
import time

from weighting import BookWeightingPipeline, GoodreadsCSVSource
from weighting.config import WeightingConfig, configure_logging


def main() -> int:
    config = WeightingConfig.from_env()
    configure_logging(config.log_level)

    csv_path = sys.argv[1] if len(sys.argv) > 1 else config.csv_path

    print("📚 GoodReads Book Weighting System")
    print("=" * 37)

    start_time = time.time()

    try:
        pipeline = BookWeightingPipeline(
            reference_date=config.reference_date,
            output_dir=config.output_dir,
        )
        result = pipeline.run(
            GoodreadsCSVSource(csv_path),
            table_path=f"{config.output_dir}/weighted_books.csv",
        )
    except Exception as e:
        elapsed = time.time() - start_time
        print(f"\n❌ Weighting failed after {elapsed:.1f}s: {e}")
        import traceback
        traceback.print_exc()
        return 1

    print("\n📊 Weight distribution:")
    for weight, count in result["weight_distribution"].items():
        print(f"   {weight}x weight: {count} books")

    if result["high_priority_books"]:
        print("\n🎯 High-priority books (series continuations):")
        for wb in result["high_priority_books"]:
            print(f"   📖 {wb.book.title} by {wb.book.author} ({wb.weight}x)")
            print(f"      Reason: {wb.reason}")

    print(f"\n🗂️  Curated set: {len(result['curated_books'])} books worth reading now")
    for cb in result["curated_books"]:
        print(f"   • [{cb.book_type.value}] {cb.book.title}")

    print("\n✅ COMPLETE!")
    print(f"⏱️  Total time: {time.time() - start_time:.1f} seconds")
    print(f"  • Books exported: {result['total_books']}")
    print(f"  • High-priority books: {len(result['high_priority_books'])}")
    print(f"📄 Weighting JSON: {result['export_path']}")
    print(f"📄 Weighted table: {result['table_path']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
