"""
Student Portal - Main Application

FastAPI backend with:
- Admin login (single shared account, seeded on demand)
- Student login and profile
- Student CRUD for the admin
- One storage backend per process: MongoDB (default) or PostgreSQL

Run: uvicorn student_portal.main:app --reload
"""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_portal.api.routes import api_router
from student_portal.core.config import get_settings
from student_portal.core.errors import register_exception_handlers
from student_portal.core.logging_config import configure_logging
from student_portal.services.storage import Storage, get_storage
from student_portal.services.admin_service import ensure_default_admin

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Student Portal",
    description="""
    Student management API for the mobile client.

    ## Features
    - **Authentication**: admin login (fixed credentials) and student login
    - **Students**: list, view, create, update and delete student records

    ## Databases
    - MongoDB or PostgreSQL, selected with STORAGE_BACKEND
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (mobile client and web preview)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Every error body is {"message": ...}
register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Prepare the storage backend and seed the admin account."""
    try:
        storage = get_storage()
        storage.init()
        ensure_default_admin(storage, settings)
        logger.info("Storage initialized (%s)", storage.name)
    except Exception as e:
        # The app still starts; admin login seeds the account on demand
        logger.warning("Storage initialization failed: %s", e)


@app.get("/health", tags=["Health"])
def health_check(storage: Storage = Depends(get_storage)):
    """Detailed health check."""
    return {
        "status": "healthy",
        "backend": storage.name,
        "storage": "connected" if storage.ping() else "disconnected"
    }
