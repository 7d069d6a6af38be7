"""
Database module - PostgreSQL and MongoDB connections.
"""
from student_portal.db.postgres import get_engine, test_postgres_connection
from student_portal.db.mongodb import get_mongo_db, test_mongo_connection

__all__ = [
    "get_engine",
    "test_postgres_connection",
    "get_mongo_db",
    "test_mongo_connection"
]
