"""FastAPI REST API for layout documents.

This module provides a REST API for validating and migrating layout
documents and for checking furniture placements.

Usage:
    uvicorn roomlayout.web:app --reload
"""

from roomlayout.web.app import app, create_app

__all__ = ["app", "create_app"]
