"""
Document Conflict Checker - FastAPI Application.

Provides REST API endpoints for comparing documents.
"""

from app.config import Settings, get_settings
from app.main import app

__all__ = [
    "app",
    "get_settings",
    "Settings",
]
