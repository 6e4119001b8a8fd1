"""cc_team REST endpoints.

GET  /teams                       — all team requests, oldest first
POST /teams                       — post a new request as the current player
POST /teams/{request_id}/join     — take one slot as the current player
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from src.cc_app.dependencies import get_app_state
from src.cc_app.state import AppState
from src.cc_common.response import ApiResponse, success_response
from src.cc_team.application.schemas import CreateTeamRequest
from src.cc_team.application.service import CREATED_NOTICE, TeamApplicationService

router = APIRouter(prefix="/teams", tags=["teams"])

_service = TeamApplicationService()


@router.get("")
async def list_team_requests(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    items = _service.list_requests(state)
    resp = success_response([r.model_dump() for r in items])
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_team_request(
    request: Request,
    body: CreateTeamRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    created = _service.create_request(state, body)
    resp = success_response(created.model_dump(), CREATED_NOTICE)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/{request_id}/join")
async def join_team_request(
    request_id: str,
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    team, notice = _service.join_request(state, request_id)
    resp = success_response(team.model_dump() if team else None, notice)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
