"""
Student Portal
Student management backend for the admin and student mobile screens.

Architecture:
- FastAPI routes under /api
- One Storage interface, two backends: MongoDB (default) and PostgreSQL
- Single shared admin account, seeded at startup and on first login
"""

__version__ = "1.0.0"
