#!/usr/bin/env python3
"""
Admin Seed Script

Prepares the configured backend (tables / indexes) and makes sure the
default admin exists. Safe to run repeatedly.
Usage: python scripts/seed_admin.py
"""
import sys
sys.path.insert(0, '.')

from student_portal.core.logging_config import configure_logging
from student_portal.services.storage import get_storage
from student_portal.services.admin_service import ensure_default_admin


def main():
    configure_logging()
    storage = get_storage()
    storage.init()
    admin = ensure_default_admin(storage)
    print(f"Admin '{admin.username}' ready in {storage.name} (id={admin.id})")


if __name__ == "__main__":
    main()
