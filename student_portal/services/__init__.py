"""
Services module - storage backends and the admin seeding routine.
"""
from student_portal.services.storage import Storage, get_storage
from student_portal.services.admin_service import ensure_default_admin

__all__ = ["Storage", "get_storage", "ensure_default_admin"]
