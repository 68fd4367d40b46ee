"""
Pydantic schemas for confession API request/response validation.

These schemas define the JSON contract of /api/confession.
No business logic belongs here.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConfessionRequest(BaseModel):
    """Request schema for creating a confession.

    Attributes:
        content: The confession text. Required; may be empty.
    """

    model_config = ConfigDict(strict=True)

    content: str = Field(..., description="Confession text")


class ConfessionSchema(BaseModel):
    """A stored confession as exposed over the API."""

    id: int
    content: str


class NewConfessionResponse(BaseModel):
    """Response schema for the create endpoint."""

    confession: ConfessionSchema


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard JSON error envelope."""

    error: str
    detail: Any = None
