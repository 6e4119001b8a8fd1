"""Session/view endpoints.

GET   /session        — who is logged in, plus the current view state
PATCH /session/view   — switch tab or ground type, set search text
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.cc_app.dependencies import get_app_state
from src.cc_app.schemas import SessionOut, UpdateViewRequest
from src.cc_app.state import AppState
from src.cc_common.response import ApiResponse, success_response

router = APIRouter(prefix="/session", tags=["session"])


@router.get("")
async def get_session(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    resp = success_response(SessionOut.from_session(state.session).model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.patch("/view")
async def update_view(
    request: Request,
    body: UpdateViewRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    session = state.session
    session.select_view(body.active_tab, body.type_filter)
    if body.search_query is not None:
        session.search_query = body.search_query

    resp = success_response(SessionOut.from_session(session).model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
