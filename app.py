# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
"""

from fruit_app.main import app  # re-export FastAPI instance
