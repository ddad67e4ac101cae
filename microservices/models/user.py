"""
User domain models and schemas.

Request/response schemas for user management.

Dependencies: pydantic
System role: User API contracts
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

UserRole = Literal["admin", "user"]


class CreateUserRequest(BaseModel):
    """Request schema for creating a new user."""

    model_config = ConfigDict(extra="forbid")

    email: str = Field(
        ...,
        pattern=EMAIL_PATTERN,
        max_length=320,
        description="User email address",
        examples=["john.doe@example.com"],
    )
    name: str = Field(..., min_length=1, max_length=255, description="Full name of the user")
    role: UserRole = Field(..., description="User role")


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user; omitted fields are left untouched."""

    model_config = ConfigDict(extra="forbid")

    email: str | None = Field(None, pattern=EMAIL_PATTERN, max_length=320)
    name: str | None = Field(None, min_length=1, max_length=255)
    role: UserRole | None = None


class UserResponse(BaseModel):
    """Response schema for user operations."""

    id: str
    email: str
    name: str
    role: str
    created_at: datetime
    updated_at: datetime
