#!/usr/bin/env python3
"""
Simple script to (re)create the database tables.
"""

import sys
sys.path.append('.')

from sqlalchemy import text

from evenue.database import engine
from evenue.services.schema_manager import create_schema_manager

# Drop and recreate every table and enum type
create_schema_manager(engine).structure_database()

print("Database tables created successfully!")

# Test connection
with engine.connect() as conn:
    result = conn.execute(text(
        "SELECT table_name FROM information_schema.tables "
        "WHERE table_schema = 'public' AND table_type = 'BASE TABLE' ORDER BY table_name"
    ))
    tables = result.fetchall()
    print(f"Created {len(tables)} tables:")
    for table in tables:
        print(f"  - {table[0]}")
