"""
Health check models.

Terminus-style health report: overall status plus per-indicator details.

Dependencies: pydantic
System role: Health check API contracts
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class IndicatorResult(BaseModel):
    """Outcome of a single health indicator."""

    key: str
    healthy: bool
    details: dict[str, Any] = Field(default_factory=dict)


class HealthReport(BaseModel):
    """Aggregated health check response."""

    status: Literal["ok", "error"]
    info: dict[str, dict[str, Any]] = Field(default_factory=dict)
    error: dict[str, dict[str, Any]] = Field(default_factory=dict)
    details: dict[str, dict[str, Any]] = Field(default_factory=dict)
