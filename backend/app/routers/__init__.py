"""
API Routers module.
"""
from app.routers import collections, health

__all__ = ["collections", "health"]
