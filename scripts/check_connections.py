#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the configured storage backend is reachable.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from student_portal.core.config import get_settings
from student_portal.db.postgres import test_postgres_connection
from student_portal.db.mongodb import test_mongo_connection


def main():
    settings = get_settings()
    print("=" * 50)
    print("STUDENT PORTAL - CONNECTION CHECK")
    print(f"Active backend: {settings.storage_backend}")
    print("=" * 50)

    ok = True

    if settings.storage_backend == "postgres":
        print("\n[1] Testing PostgreSQL...")
        print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")
        ok = test_postgres_connection()
        print("    PostgreSQL: CONNECTED" if ok else "    PostgreSQL: FAILED")
    else:
        print("\n[1] Testing MongoDB...")
        print(f"    URI: {settings.mongodb_uri}")
        print(f"    Database: {settings.mongodb_db}")
        ok = test_mongo_connection()
        print("    MongoDB: CONNECTED" if ok else "    MongoDB: FAILED")

    print("\n" + "=" * 50)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
