"""
Storage Interface - one contract, two backends.

Routes talk only to `Storage`. Exactly one implementation is built per
process, picked by STORAGE_BACKEND:
- mongodb  -> MongoStorage    (documents in the admins/students collections)
- postgres -> PostgresStorage (rows in the admins/students tables)

Every call is a single backend round-trip. Nothing is cached and nothing
is retried; backend errors propagate to the caller.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, List, Optional

from student_portal.core.config import get_settings
from student_portal.schemas.schemas import AdminRecord, StudentRecord

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Persistence contract for admins and students."""

    name: str = "abstract"

    # ---- lifecycle ----

    @abstractmethod
    def init(self) -> None:
        """Prepare the backend (tables / unique indexes). Must be idempotent."""

    @abstractmethod
    def ping(self) -> bool:
        """True when the backend is reachable."""

    # ---- admins ----

    @abstractmethod
    def get_admin(self, id: str) -> Optional[AdminRecord]:
        ...

    @abstractmethod
    def get_admin_by_username(self, username: str) -> Optional[AdminRecord]:
        ...

    @abstractmethod
    def create_admin(self, fields: Dict[str, Any]) -> AdminRecord:
        """Insert an admin from {username, password, name}."""

    # ---- students ----

    @abstractmethod
    def get_student(self, id: str) -> Optional[StudentRecord]:
        ...

    @abstractmethod
    def get_student_by_student_id(self, student_id: str) -> Optional[StudentRecord]:
        ...

    @abstractmethod
    def get_student_by_email(self, email: str) -> Optional[StudentRecord]:
        ...

    @abstractmethod
    def get_all_students(self) -> List[StudentRecord]:
        """All students. Order is backend-defined."""

    @abstractmethod
    def create_student(self, fields: Dict[str, Any]) -> StudentRecord:
        """
        Insert a student.

        Args:
            fields: snake_case keys - student_id, name, email, password,
                    and optionally phone, age
        """

    @abstractmethod
    def update_student(self, id: str, fields: Dict[str, Any]) -> Optional[StudentRecord]:
        """
        Apply a partial update and return the new record.
        The API only ever passes name/email/phone/age; `is_active` is accepted
        for administrative scripts. Returns None when no student has this id.
        """

    @abstractmethod
    def delete_student(self, id: str) -> bool:
        """Delete by id. Returns True once the delete has been issued."""


@lru_cache()
def get_storage() -> Storage:
    """
    Build the configured backend once per process.
    FastAPI dependency - tests replace it via app.dependency_overrides.
    """
    settings = get_settings()

    if settings.storage_backend == "postgres":
        from student_portal.db.postgres import get_engine
        from student_portal.services.postgres_storage import PostgresStorage
        storage = PostgresStorage(get_engine())
    else:
        from student_portal.db.mongodb import get_mongo_db
        from student_portal.services.mongo_storage import MongoStorage
        storage = MongoStorage(get_mongo_db())

    logger.info("Using %s storage backend", storage.name)
    return storage
