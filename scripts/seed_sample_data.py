#!/usr/bin/env python3
"""
Script to seed the database with the Evenue sample data.
"""
import sys
from pathlib import Path

# Add the project directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from evenue.database import get_db, create_tables
from evenue.models import UserInfo
from evenue.services.sample_loader import create_sample_loader


def seed_sample_data():
    """Seed the database with sample data unless users already exist."""
    # Create tables if they don't exist
    create_tables()

    db = next(get_db())
    try:
        # Check if users already exist
        existing_users = db.query(UserInfo).count()
        if existing_users:
            print(f"Database already holds {existing_users} users, skipping.")
            print("Run `scripts/run_showcase.py truncate` first to reload the sample data.")
            return

        counts = create_sample_loader(db).load_all()
        for table, count in counts.items():
            print(f"  - {table}: {count} rows")

        print(f"\n✅ Successfully seeded {sum(counts.values())} rows")

    except Exception as e:
        print(f"❌ Error seeding sample data: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    print("🌱 Seeding Evenue sample data...")
    seed_sample_data()
    print("Done!")
