"""Pydantic schemas used as views in the MVC architecture."""

from .common import ErrorResponse
from .hello import GreetingResponse

__all__ = [
    "ErrorResponse",
    "GreetingResponse",
]
