"""cc_ground REST endpoints.

GET  /grounds                     — catalog, filtered by the session view
GET  /grounds/{ground_id}         — full detail
POST /grounds/{ground_id}/book    — book it (notice only if already booked)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.cc_app.dependencies import get_app_state
from src.cc_app.state import AppState
from src.cc_booking.application.service import BookingApplicationService
from src.cc_common.enums import TypeFilter
from src.cc_common.response import ApiResponse, success_response
from src.cc_ground.application.service import GroundApplicationService

router = APIRouter(prefix="/grounds", tags=["grounds"])

_service = GroundApplicationService()
_bookings = BookingApplicationService(grounds=_service)


@router.get("")
async def list_grounds(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
    search: str | None = Query(
        None, description="Name/location search text. Omit to keep the session's."
    ),
    type_filter: TypeFilter | None = Query(
        None,
        alias="type",
        description="all | full-ground | box-cricket. Omit to keep the session's.",
    ),
) -> ApiResponse:
    result = _service.list_grounds(state, search, type_filter)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{ground_id}")
async def get_ground(
    ground_id: str,
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    result = _service.get_ground(state, ground_id)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/{ground_id}/book")
async def book_ground(
    ground_id: str,
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    result, notice = _bookings.book(state, ground_id)
    resp = success_response(result.model_dump(), notice)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
