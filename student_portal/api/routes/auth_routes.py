"""
Authentication Routes

POST /admin/login   - Login with the shared admin credentials
POST /student/login - Login with studentId + password

No tokens are issued; a successful login returns the public profile.
Passwords are compared as plain strings.
"""

import logging

from fastapi import APIRouter, HTTPException, Depends, status

from student_portal.core.config import Settings, get_settings
from student_portal.services.storage import Storage, get_storage
from student_portal.services.admin_service import check_admin_credentials, ensure_default_admin
from student_portal.schemas.schemas import (
    AdminLoginRequest, StudentLoginRequest, AdminLoginResponse, StudentLoginResponse,
    to_admin_response, to_student_response
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

INVALID_ADMIN_CREDENTIALS = "Invalid credentials"
INVALID_STUDENT_CREDENTIALS = "Invalid student ID or password"
INACTIVE_ACCOUNT = "Your account is inactive. Please contact admin."


@router.post("/admin/login", response_model=AdminLoginResponse)
def admin_login(
    request: AdminLoginRequest,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings)
):
    """
    Login as the admin.

    The admin row is created on the first successful login if it is missing.
    """
    if not check_admin_credentials(request.username, request.password, settings):
        logger.info("Rejected admin login for username '%s'", request.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_ADMIN_CREDENTIALS)

    admin = ensure_default_admin(storage, settings)

    return AdminLoginResponse(message="Login successful", admin=to_admin_response(admin))


@router.post("/student/login", response_model=StudentLoginResponse)
def student_login(request: StudentLoginRequest, storage: Storage = Depends(get_storage)):
    """
    Login as a student.

    Unknown studentId and wrong password give the same 401;
    an inactive account with correct credentials gives 403.
    """
    student = storage.get_student_by_student_id(request.student_id)

    if not student or student.password != request.password:
        logger.info("Rejected student login for studentId '%s'", request.student_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_STUDENT_CREDENTIALS)

    if not student.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=INACTIVE_ACCOUNT)

    return StudentLoginResponse(message="Login successful", student=to_student_response(student))
