"""
Schemas module - Request/Response schemas for API endpoints.

- Records: what the storage layer returns (password included)
- Requests: what the API accepts
- Responses: what the API returns (password never included)
"""

from student_portal.schemas.schemas import (
    AdminRecord, StudentRecord,
    AdminLoginRequest, StudentLoginRequest, StudentCreate, StudentUpdate,
    AdminResponse, StudentResponse, AdminLoginResponse, StudentLoginResponse,
    MessageResponse, to_admin_response, to_student_response
)

__all__ = [
    "AdminRecord", "StudentRecord",
    "AdminLoginRequest", "StudentLoginRequest", "StudentCreate", "StudentUpdate",
    "AdminResponse", "StudentResponse", "AdminLoginResponse", "StudentLoginResponse",
    "MessageResponse", "to_admin_response", "to_student_response"
]
