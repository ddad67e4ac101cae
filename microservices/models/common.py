"""
Common response models and utilities.

Error schema and small shared response bodies.

Dependencies: pydantic
System role: Common API response structures
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")


class MessageResponse(BaseModel):
    """Plain acknowledgement message."""

    message: str


class ServiceInfoResponse(BaseModel):
    """Service information returned by the root endpoint."""

    name: str
    version: str
    description: str
    environment: str
    timestamp: datetime
