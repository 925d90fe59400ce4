"""Pydantic schemas for the greeting endpoint."""

from pydantic import BaseModel


class GreetingResponse(BaseModel):
    message: str
    ts: str
