"""
Request and response schemas for API endpoints.
"""
from app.schemas.common import CreatedResponse, StatusResponse, ErrorResponse

__all__ = [
    "CreatedResponse",
    "StatusResponse",
    "ErrorResponse",
]
