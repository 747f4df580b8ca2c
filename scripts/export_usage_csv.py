#!/usr/bin/env python3
"""
Pool Usage to CSV Export Script

Exports stored pool usage readings to a CSV file, oldest first.

Usage:
    python scripts/export_usage_csv.py [output_path]
"""

import csv
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import (
    count_usage_readings,
    create_db_engine,
    get_session_factory,
    get_usage_history,
)
from config.settings import load_settings
from utils.exceptions import PoolMonitorError
from utils.logging_config import configure_logging

DEFAULT_OUTPUT = Path(__file__).parent.parent / "data" / "csvs" / "pool_usage.csv"
COLUMNS = ["id", "timestamp", "percentage"]

def export_readings(readings, csv_path):
    """
    Write readings to a CSV file.

    Returns:
        int: Number of rows written
    """
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)

    with open(csv_path, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=COLUMNS)
        writer.writeheader()
        for reading in readings:
            row = dict(reading)
            row['timestamp'] = row['timestamp'].isoformat()
            writer.writerow(row)

    return len(readings)

def main(argv=None):
    """Export all readings."""
    argv = sys.argv[1:] if argv is None else argv
    output_path = Path(argv[0]) if argv else DEFAULT_OUTPUT

    load_dotenv()
    configure_logging()

    print("📊 Pool Usage CSV Export Tool")
    print("=" * 40)

    engine = None
    try:
        settings = load_settings(require_telegram=False)
        engine = create_db_engine(settings.database_url)
        session_factory = get_session_factory(engine)

        total = count_usage_readings(session_factory)
        print(f"📋 Found {total} stored readings")
        if not total:
            print("⚠️  No readings stored yet")
            return 0

        readings = get_usage_history(session_factory, limit=None)

        readings.reverse()
        count = export_readings(readings, output_path)
        print(f"✅ Exported {count} readings to {output_path}")
        return 0

    except PoolMonitorError as e:
        print(f"❌ Error during export: {e}")
        return 1
    finally:
        if engine is not None:
            engine.dispose()

if __name__ == "__main__":
    sys.exit(main())
