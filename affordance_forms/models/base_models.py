"""Pydantic models for request/response validation."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str
    template_loaded: bool = Field(..., description="Whether the form template compiled at startup")
