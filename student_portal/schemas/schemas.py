"""
Pydantic Schemas - Request/Response Validation

All records, request bodies and response shapes in one file for simplicity.

JSON on the wire is camelCase (studentId, isActive); Python attributes stay
snake_case. Records carry the password; public/response models never do.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class CamelModel(BaseModel):
    """Base for API models: camelCase aliases, snake_case names both accepted."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# STORAGE RECORDS
# What the storage backends hand back (password included)
# ============================================================

class AdminRecord(BaseModel):
    id: str
    username: str
    password: str
    name: str
    created_at: Optional[datetime] = None


class StudentRecord(BaseModel):
    id: str
    student_id: str
    name: str
    email: str
    phone: Optional[str] = None
    age: Optional[str] = None
    password: str
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ============================================================
# AUTH SCHEMAS
# ============================================================

class AdminLoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class StudentLoginRequest(CamelModel):
    student_id: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(CamelModel):
    student_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    age: Optional[str] = None
    password: str = Field(..., min_length=1)

class StudentUpdate(CamelModel):
    # password, studentId and isActive are not updatable; unknown keys are dropped
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    age: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def reject_null(cls, value):
        # may be omitted, but never cleared: both columns are NOT NULL
        if value is None:
            raise ValueError("Expected string, received null")
        return value


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class AdminResponse(CamelModel):
    id: str
    username: str
    name: str

class StudentResponse(CamelModel):
    id: str
    student_id: str
    name: str
    email: str
    phone: Optional[str] = None
    age: Optional[str] = None
    is_active: bool

class AdminLoginResponse(CamelModel):
    message: str
    admin: AdminResponse

class StudentLoginResponse(CamelModel):
    message: str
    student: StudentResponse

class MessageResponse(BaseModel):
    message: str


def to_admin_response(admin: AdminRecord) -> AdminResponse:
    """Project an admin record onto its public shape."""
    return AdminResponse(id=admin.id, username=admin.username, name=admin.name)


def to_student_response(student: StudentRecord) -> StudentResponse:
    """Project a student record onto its public shape (drops password and timestamps)."""
    return StudentResponse(
        id=student.id, student_id=student.student_id, name=student.name,
        email=student.email, phone=student.phone, age=student.age,
        is_active=student.is_active
    )
