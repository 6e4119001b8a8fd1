"""cc_booking REST endpoints.

GET /bookings — the ledger, oldest first

Booking itself lives under /grounds/{ground_id}/book.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.cc_app.dependencies import get_app_state
from src.cc_app.state import AppState
from src.cc_booking.application.service import BookingApplicationService
from src.cc_common.response import ApiResponse, success_response

router = APIRouter(prefix="/bookings", tags=["bookings"])

_service = BookingApplicationService()


@router.get("")
async def list_bookings(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    result = _service.list_bookings(state)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
