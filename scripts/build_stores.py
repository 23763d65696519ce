"""
Population store build script.

Builds the results and download stores from the source CSV.
Run this once before starting the server, and again whenever the
source data changes.
"""
import argparse
import logging
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from popbuilder.config import settings  # noqa: E402
from popbuilder.store_builder import build_stores_from_csv  # noqa: E402

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main():
    """Main build function."""
    parser = argparse.ArgumentParser(description="Build the population stores from a CSV file.")
    parser.add_argument("--source", default=settings.SOURCE_CSV_PATH, help="source CSV path")
    parser.add_argument("--results-db", default=settings.RESULTS_DATABASE_PATH, help="results store path")
    parser.add_argument("--download-db", default=settings.DOWNLOAD_DATABASE_PATH, help="download store path")
    args = parser.parse_args()
    
    print("=" * 60)
    print("🚀 Population Builder - Store Build")
    print("=" * 60)
    
    if not os.path.exists(args.source):
        logger.error(f"Source data not found: {args.source}")
        sys.exit(1)
    
    try:
        count = build_stores_from_csv(args.source, args.results_db, args.download_db)
    except ValueError as e:
        logger.error(f"Invalid source data: {e}")
        sys.exit(1)
    
    print("\n" + "=" * 60)
    print("✅ Store build complete!")
    print(f"  📊 Zones: {count:,}")
    print(f"  📁 Results store: {args.results_db}")
    print(f"  📁 Download store: {args.download_db}")
    print("=" * 60)
    print("\n🚀 You can now start the server with: python run.py")


if __name__ == "__main__":
    main()
