"""
Student Routes

GET    /students      - List all students
GET    /students/{id} - Get one student
POST   /students      - Create student
PUT    /students/{id} - Update name/email/phone/age
DELETE /students/{id} - Delete student

Passwords are never returned. studentId and email uniqueness is checked
before insert; the backend's unique constraint is the last line.
"""

import logging

from fastapi import APIRouter, HTTPException, Depends, status
from typing import List

from student_portal.services.storage import Storage, get_storage
from student_portal.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentResponse, MessageResponse, to_student_response
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["Students"])

STUDENT_NOT_FOUND = "Student not found"


@router.get("", response_model=List[StudentResponse])
def list_students(storage: Storage = Depends(get_storage)):
    """Get all students."""
    return [to_student_response(s) for s in storage.get_all_students()]


@router.get("/{id}", response_model=StudentResponse)
def get_student(id: str, storage: Storage = Depends(get_storage)):
    """Get a student by record id."""
    student = storage.get_student(id)
    if not student:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=STUDENT_NOT_FOUND)
    return to_student_response(student)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(data: StudentCreate, storage: Storage = Depends(get_storage)):
    """Create a student. studentId and email must both be unused."""
    if storage.get_student_by_student_id(data.student_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Student ID already exists")

    if storage.get_student_by_email(data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists")

    student = storage.create_student(data.model_dump())
    logger.info("Created student %s (%s)", student.student_id, student.id)

    return to_student_response(student)


@router.put("/{id}", response_model=StudentResponse)
def update_student(id: str, data: StudentUpdate, storage: Storage = Depends(get_storage)):
    """Update profile fields. Only fields present in the body are changed."""
    student = storage.update_student(id, data.model_dump(exclude_unset=True))
    if not student:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=STUDENT_NOT_FOUND)

    logger.info("Updated student %s (%s)", student.student_id, student.id)
    return to_student_response(student)


@router.delete("/{id}", response_model=MessageResponse)
def delete_student(id: str, storage: Storage = Depends(get_storage)):
    """Delete a student."""
    if not storage.get_student(id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=STUDENT_NOT_FOUND)

    storage.delete_student(id)
    logger.info("Deleted student %s", id)

    return MessageResponse(message="Student deleted successfully")
