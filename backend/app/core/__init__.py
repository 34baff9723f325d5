"""
Core module - process-wide utilities.
"""
from app.core.logging import configure_logging

__all__ = ["configure_logging"]
