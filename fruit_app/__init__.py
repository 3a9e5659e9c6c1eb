# fruit_app/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn fruit_app:app --reload
"""

from .main import app

__all__ = ["app"]
