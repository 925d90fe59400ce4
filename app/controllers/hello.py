"""Greeting controller."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.telemetry import increment_greeting
from app.utils import Clock, format_rfc3339, get_clock
from app.views import GreetingResponse

router = APIRouter(prefix="/hello", tags=["hello"])

GREETING = "hello"

ClockDep = Annotated[Clock, Depends(get_clock)]


@router.get("", response_model=GreetingResponse)
async def hello(clock: ClockDep) -> GreetingResponse:
    """Return the greeting stamped with the current server time."""

    greeting = GreetingResponse(message=GREETING, ts=format_rfc3339(clock()))
    increment_greeting()
    return greeting
