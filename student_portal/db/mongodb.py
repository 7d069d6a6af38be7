"""
MongoDB Connection Utility

MongoDB stores (when STORAGE_BACKEND=mongodb, the default):
- admins:   the single shared admin account
- students: student profiles and login credentials

Uniqueness of username / studentId / email is enforced by unique indexes,
created by init_mongo_indexes() at startup.
"""
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from student_portal.core.config import get_settings

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(get_settings().mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the configured student_portal database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


# Collection name constants (avoid typos)
COLLECTIONS = {
    "admins": "admins",
    "students": "students"
}


def get_collection(name: str, db: Database = None) -> Collection:
    """
    Get a specific collection.
    Collections we'll use:
    - admins
    - students
    """
    db = db if db is not None else get_mongo_db()
    return db[COLLECTIONS[name]]


def test_mongo_connection(db: Database = None) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        db = db if db is not None else get_mongo_db()
        # ping command checks connection
        db.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database = None):
    """
    Create unique indexes backing the uniqueness invariants.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    db[COLLECTIONS["admins"]].create_index([("username", ASCENDING)], unique=True)
    db[COLLECTIONS["students"]].create_index([("studentId", ASCENDING)], unique=True)
    db[COLLECTIONS["students"]].create_index([("email", ASCENDING)], unique=True)

    logger.info("MongoDB indexes created successfully")
