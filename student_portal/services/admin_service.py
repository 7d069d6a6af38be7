"""
Admin Service - the single shared admin account.

There is exactly one admin, with credentials from settings. It is seeded
by ensure_default_admin(): at startup, and again on every successful admin
login, so a fresh database works even when startup seeding failed.
"""

import logging
from typing import Optional

from student_portal.core.config import Settings, get_settings
from student_portal.schemas.schemas import AdminRecord
from student_portal.services.storage import Storage

logger = logging.getLogger(__name__)


def ensure_default_admin(storage: Storage, settings: Optional[Settings] = None) -> AdminRecord:
    """Return the configured admin, creating it first if it doesn't exist (check-then-create)."""
    settings = settings or get_settings()

    admin = storage.get_admin_by_username(settings.admin_username)
    if admin:
        return admin

    logger.info("Seeding default admin '%s'", settings.admin_username)
    return storage.create_admin({
        "username": settings.admin_username,
        "password": settings.admin_password,
        "name": settings.admin_name
    })


def check_admin_credentials(username: str, password: str, settings: Optional[Settings] = None) -> bool:
    """Plain comparison against the configured pair. Passwords are not hashed."""
    settings = settings or get_settings()
    return username == settings.admin_username and password == settings.admin_password
