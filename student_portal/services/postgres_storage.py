"""
PostgreSQL Storage - Storage implementation over the admins/students tables.

One session per operation: committed on success, rolled back on error.
Ids are UUID4 strings generated client-side (see db/postgres.py).
"""

import logging
from typing import Optional, List, Dict, Any
from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from student_portal.db.postgres import (
    admins, students, make_session_factory, session_scope,
    init_postgres_tables, test_postgres_connection
)
from student_portal.schemas.schemas import AdminRecord, StudentRecord
from student_portal.services.storage import Storage

logger = logging.getLogger(__name__)

ADMIN_COLUMNS = ("username", "password", "name")
STUDENT_COLUMNS = ("student_id", "name", "email", "phone", "age", "password", "is_active")


def _pick(fields: Dict[str, Any], columns) -> dict:
    return {key: value for key, value in fields.items() if key in columns}


class PostgresStorage(Storage):
    """Admins and students as rows; uniqueness backed by UNIQUE constraints."""

    name = "postgres"

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)

    def init(self) -> None:
        init_postgres_tables(self.engine)

    def ping(self) -> bool:
        return test_postgres_connection(self.engine)

    # ---- admins ----

    def _fetch_admin(self, db, where) -> Optional[AdminRecord]:
        row = db.execute(select(admins).where(where)).mappings().first()
        return AdminRecord(**row) if row else None

    def get_admin(self, id: str) -> Optional[AdminRecord]:
        with session_scope(self.SessionLocal) as db:
            return self._fetch_admin(db, admins.c.id == id)

    def get_admin_by_username(self, username: str) -> Optional[AdminRecord]:
        with session_scope(self.SessionLocal) as db:
            return self._fetch_admin(db, admins.c.username == username)

    def create_admin(self, fields: Dict[str, Any]) -> AdminRecord:
        with session_scope(self.SessionLocal) as db:
            result = db.execute(insert(admins).values(**_pick(fields, ADMIN_COLUMNS)))
            new_id = result.inserted_primary_key[0]
            logger.debug("Inserted admin row %s", new_id)
            return self._fetch_admin(db, admins.c.id == new_id)

    # ---- students ----

    def _fetch_student(self, db, where) -> Optional[StudentRecord]:
        row = db.execute(select(students).where(where)).mappings().first()
        return StudentRecord(**row) if row else None

    def get_student(self, id: str) -> Optional[StudentRecord]:
        with session_scope(self.SessionLocal) as db:
            return self._fetch_student(db, students.c.id == id)

    def get_student_by_student_id(self, student_id: str) -> Optional[StudentRecord]:
        with session_scope(self.SessionLocal) as db:
            return self._fetch_student(db, students.c.student_id == student_id)

    def get_student_by_email(self, email: str) -> Optional[StudentRecord]:
        with session_scope(self.SessionLocal) as db:
            return self._fetch_student(db, students.c.email == email)

    def get_all_students(self) -> List[StudentRecord]:
        with session_scope(self.SessionLocal) as db:
            rows = db.execute(select(students).order_by(students.c.created_at)).mappings().all()
            return [StudentRecord(**row) for row in rows]

    def create_student(self, fields: Dict[str, Any]) -> StudentRecord:
        with session_scope(self.SessionLocal) as db:
            result = db.execute(insert(students).values(**_pick(fields, STUDENT_COLUMNS)))
            new_id = result.inserted_primary_key[0]
            logger.debug("Inserted student row %s", new_id)
            return self._fetch_student(db, students.c.id == new_id)

    def update_student(self, id: str, fields: Dict[str, Any]) -> Optional[StudentRecord]:
        changes = _pick(fields, STUDENT_COLUMNS)
        with session_scope(self.SessionLocal) as db:
            if changes:
                # updated_at is refreshed by the column's onupdate
                db.execute(update(students).where(students.c.id == id).values(**changes))
            return self._fetch_student(db, students.c.id == id)

    def delete_student(self, id: str) -> bool:
        with session_scope(self.SessionLocal) as db:
            result = db.execute(delete(students).where(students.c.id == id))
            logger.debug("Deleted %d student row(s) for %s", result.rowcount, id)
        return True
