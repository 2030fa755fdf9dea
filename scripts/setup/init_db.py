# scripts/setup/init_db.py
"""
Initialize database: creates TABLA_VANS, VANS_AVERIAS and users.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from vanfleet.database import build_engine, create_tables
from vanfleet.config import settings
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError


def main():
    print("Van Fleet DB Initialization")
    print("=" * 40)
    print(f"Database: {settings.DATABASE_URL}")

    engine = build_engine()

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except SQLAlchemyError as e:
        print(f"Cannot connect to database: {e}")
        print("\nMake sure PostgreSQL is running and DATABASE_URL is set in .env")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables(engine)

    tables = sorted(inspect(engine).get_table_names())
    print(f"\nTables in database ({len(tables)} total):")
    for t in tables:
        print(f"   - {t}")

    print("\nDatabase ready! You can now start the backend:")
    print("   uvicorn vanfleet.main:app --host 0.0.0.0 --port 8080 --reload")


if __name__ == "__main__":
    main()
