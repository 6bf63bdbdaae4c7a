#!/usr/bin/env python3
"""Check that the search tables exist, printing their DDL if they do not."""
import sys
from pathlib import Path

sys.path.insert(0, '.')

from app.db.supabase_client import get_supabase

MIGRATIONS = [
    ("search_index", "migrations/0001_search_index.sql"),
    ("creative_assets", "migrations/0002_creative_assets.sql"),
]


def run_migration():
    supabase = get_supabase()
    missing = []

    for table, migration_file in MIGRATIONS:
        try:
            print(f"🔍 Checking {table} table...")
            supabase.table(table).select('*').limit(1).execute()
            print(f"✅ {table} exists")
        except Exception as e:
            print(f"❌ {table} check failed: {e}")
            missing.append(migration_file)

    try:
        print("🔍 Checking search_index_query function...")
        supabase.rpc(
            "search_index_query",
            {"p_user_id": "", "p_query": "launch", "p_limit": 1},
        ).execute()
        print("✅ search_index_query exists")
    except Exception as e:
        print(f"❌ search_index_query check failed: {e}")
        if MIGRATIONS[0][1] not in missing:
            missing.append(MIGRATIONS[0][1])

    if missing:
        print("💡 Run this SQL in your Supabase SQL editor:")
        for migration_file in missing:
            print("=" * 60)
            print(Path(migration_file).read_text())
        print("=" * 60)
        sys.exit(1)


if __name__ == "__main__":
    run_migration()
