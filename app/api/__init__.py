"""API routes"""

from app.api import buglist

__all__ = ["buglist"]
