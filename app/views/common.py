"""Shared response schemas."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned by the catch-all handler for unexpected failures."""

    detail: str = Field(examples=["Internal server error"])
