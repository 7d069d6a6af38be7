"""
MongoDB Storage - Storage implementation over document collections.

Collections in this database:
1. admins   - {username, password, name, createdAt}
2. students - {studentId, name, email, phone, age, password, isActive, createdAt, updatedAt}

Documents use camelCase keys; records handed back to the routes use
snake_case attributes. _id (ObjectId) is exposed as the string `id`.
"""

import logging
from datetime import datetime
from typing import Optional, List, Dict, Any
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from student_portal.db.mongodb import get_collection, init_mongo_indexes, test_mongo_connection
from student_portal.schemas.schemas import AdminRecord, StudentRecord
from student_portal.services.storage import Storage

logger = logging.getLogger(__name__)

# record attribute -> document key
STUDENT_FIELDS = {
    "student_id": "studentId",
    "name": "name",
    "email": "email",
    "phone": "phone",
    "age": "age",
    "password": "password",
    "is_active": "isActive",
}


# ============================================================
# HELPERS: ObjectId handling and document -> record mapping
# ============================================================

def to_object_id(id: str) -> Optional[ObjectId]:
    """Parse a string id; malformed ids map to None (treated as 'not found')."""
    if not ObjectId.is_valid(id):
        return None
    return ObjectId(id)


def doc_to_admin(doc: dict) -> Optional[AdminRecord]:
    if doc is None:
        return None
    return AdminRecord(
        id=str(doc["_id"]),
        username=doc["username"],
        password=doc["password"],
        name=doc["name"],
        created_at=doc.get("createdAt")
    )


def doc_to_student(doc: dict) -> Optional[StudentRecord]:
    if doc is None:
        return None
    return StudentRecord(
        id=str(doc["_id"]),
        student_id=doc["studentId"],
        name=doc["name"],
        email=doc["email"],
        phone=doc.get("phone") or None,
        age=doc.get("age") or None,
        password=doc["password"],
        is_active=doc.get("isActive", True),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt")
    )


def student_fields_to_doc(fields: Dict[str, Any]) -> dict:
    return {STUDENT_FIELDS[key]: value for key, value in fields.items() if key in STUDENT_FIELDS}


# ============================================================
# STORAGE
# ============================================================

class MongoStorage(Storage):
    """
    Admins and students as MongoDB documents.
    Uniqueness is backed by the indexes from init_mongo_indexes().
    """

    name = "mongodb"

    def __init__(self, db: Database):
        self.db = db
        self.admins: Collection = get_collection("admins", db)
        self.students: Collection = get_collection("students", db)

    def init(self) -> None:
        init_mongo_indexes(self.db)

    def ping(self) -> bool:
        return test_mongo_connection(self.db)

    # ---- admins ----

    def get_admin(self, id: str) -> Optional[AdminRecord]:
        oid = to_object_id(id)
        if oid is None:
            return None
        return doc_to_admin(self.admins.find_one({"_id": oid}))

    def get_admin_by_username(self, username: str) -> Optional[AdminRecord]:
        return doc_to_admin(self.admins.find_one({"username": username}))

    def create_admin(self, fields: Dict[str, Any]) -> AdminRecord:
        doc = {
            "username": fields["username"],
            "password": fields["password"],
            "name": fields["name"],
            "createdAt": datetime.utcnow()
        }
        result = self.admins.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.debug("Inserted admin %s", result.inserted_id)
        return doc_to_admin(doc)

    # ---- students ----

    def get_student(self, id: str) -> Optional[StudentRecord]:
        oid = to_object_id(id)
        if oid is None:
            return None
        return doc_to_student(self.students.find_one({"_id": oid}))

    def get_student_by_student_id(self, student_id: str) -> Optional[StudentRecord]:
        return doc_to_student(self.students.find_one({"studentId": student_id}))

    def get_student_by_email(self, email: str) -> Optional[StudentRecord]:
        return doc_to_student(self.students.find_one({"email": email}))

    def get_all_students(self) -> List[StudentRecord]:
        return [doc_to_student(doc) for doc in self.students.find()]

    def create_student(self, fields: Dict[str, Any]) -> StudentRecord:
        now = datetime.utcnow()
        doc = student_fields_to_doc(fields)
        doc.setdefault("isActive", True)
        doc["createdAt"] = now
        doc["updatedAt"] = now
        result = self.students.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.debug("Inserted student %s", result.inserted_id)
        return doc_to_student(doc)

    def update_student(self, id: str, fields: Dict[str, Any]) -> Optional[StudentRecord]:
        oid = to_object_id(id)
        if oid is None:
            return None

        changes = student_fields_to_doc(fields)
        if not changes:
            return self.get_student(id)

        changes["updatedAt"] = datetime.utcnow()
        doc = self.students.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER
        )
        return doc_to_student(doc)

    def delete_student(self, id: str) -> bool:
        oid = to_object_id(id)
        if oid is not None:
            result = self.students.delete_one({"_id": oid})
            logger.debug("Deleted %d student document(s) for %s", result.deleted_count, id)
        return True
