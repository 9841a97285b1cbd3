"""FastAPI REST API for the shade sail measurement engine.

Usage:
    uvicorn shadesail.web:app --reload
"""

from shadesail.web.app import app, create_app

__all__ = ["app", "create_app"]
