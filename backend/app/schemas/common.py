"""
Response bodies shared by every collection endpoint.
"""
from pydantic import BaseModel, Field


class CreatedResponse(BaseModel):
    """Identifier of a newly inserted document."""
    id: str = Field(..., alias="_id", description="MongoDB ObjectId as string")


class StatusResponse(BaseModel):
    """Human-readable outcome of an update, a delete or a failed lookup."""
    status: str


class ErrorResponse(BaseModel):
    """Unexpected failure, with the underlying error message."""
    error: str
