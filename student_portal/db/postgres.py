"""
PostgreSQL Connection Utility

PostgreSQL stores (when STORAGE_BACKEND=postgres):
- admins:   the single shared admin account
- students: student profiles and login credentials

Tables are declared with SQLAlchemy Core so the same definitions work for
create_all() in production and in-memory SQLite under test.
"""
import logging
import uuid
from contextlib import contextmanager
from datetime import datetime

from sqlalchemy import (
    Boolean, Column, DateTime, MetaData, String, Table, Text, create_engine, text
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from student_portal.core.config import get_settings

logger = logging.getLogger(__name__)

metadata = MetaData()


def _new_id() -> str:
    return str(uuid.uuid4())


admins = Table(
    "admins", metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("username", Text, nullable=False, unique=True),
    Column("password", Text, nullable=False),
    Column("name", Text, nullable=False),
    Column("created_at", DateTime, nullable=False, default=datetime.utcnow),
)

students = Table(
    "students", metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("student_id", Text, nullable=False, unique=True),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False, unique=True),
    Column("phone", Text),
    Column("age", Text),
    Column("password", Text, nullable=False),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("created_at", DateTime, nullable=False, default=datetime.utcnow),
    Column("updated_at", DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow),
)

# Global engine (created on first use so the mongodb backend never needs a driver)
_engine: Engine = None


def get_engine() -> Engine:
    """
    Get or create the engine (singleton pattern).
    pool_size=5: maintain 5 connections ready
    max_overflow=10: allow 10 extra connections under load
    """
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(
            settings.postgres_url,
            pool_size=5,
            max_overflow=10,
            echo=settings.debug  # Log SQL queries in debug mode
        )
    return _engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker):
    """
    Context manager for database sessions.
    Commits on success, rolls back on any error and re-raises.
    Usage:
        with session_scope(factory) as db:
            db.execute(select(students))
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_postgres_tables(engine: Engine) -> None:
    """
    Create tables and unique constraints if they don't exist.
    Call this once during app startup.
    """
    metadata.create_all(engine)
    logger.info("PostgreSQL tables ready")


def test_postgres_connection(engine: Engine = None) -> bool:
    """
    Test if PostgreSQL is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with (engine or get_engine()).connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1
    except Exception as e:
        logger.warning("PostgreSQL connection failed: %s", e)
        return False
