"""Common response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorCause(BaseModel):
    """A single field-level validation failure."""

    field: str = ""
    message: str = ""


class ErrorResponse(BaseModel):
    """Standard error response from the control-plane API.

    Format: ``{"title": ..., "details": ..., "causes": [{"field", "message"}]}``
    """

    title: str = ""
    details: str = ""
    causes: list[ErrorCause] = Field(default_factory=list)
