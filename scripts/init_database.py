#!/usr/bin/env python3
"""
Database Initialization Script

Run this script to create the pool_usage table without scraping.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import create_db_engine, init_database
from config.settings import load_settings
from utils.exceptions import PoolMonitorError
from utils.logging_config import configure_logging

def main():
    """Create the pool_usage table."""
    load_dotenv()
    configure_logging()

    print("🚀 Initializing Pool Usage Database...")
    print("=" * 50)

    engine = None
    try:
        settings = load_settings(require_telegram=False)
        engine = create_db_engine(settings.database_url)
        init_database(engine)
        print("✅ Database initialized successfully!")

        print("\n📊 Database Structure:")
        print("   - pool_usage: id, timestamp (with time zone), percentage")

    except PoolMonitorError as e:
        print(f"❌ Error initializing database: {e}")
        return 1
    finally:
        if engine is not None:
            engine.dispose()

    return 0

if __name__ == "__main__":
    sys.exit(main())
