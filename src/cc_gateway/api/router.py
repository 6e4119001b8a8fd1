"""Auth API router: register, login, logout.

All endpoints return ApiResponse. request_id is read from request.state
(injected by RequestLogMiddleware). The message field carries the notice
shown to the player.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from src.cc_app.dependencies import get_app_state
from src.cc_app.schemas import SessionOut
from src.cc_app.state import AppState
from src.cc_common.response import ApiResponse, success_response
from src.cc_gateway.user.schemas import LoginRequest, PlayerInfo, RegisterRequest
from src.cc_gateway.user.service import LOGIN_NOTICE, LOGOUT_NOTICE, REGISTRATION_NOTICE

router = APIRouter(prefix="/auth", tags=["auth"])


def _get_request_id(request: Request) -> str:
    """Read request_id injected by RequestLogMiddleware, fallback if absent."""
    return getattr(request.state, "request_id", "req_unknown")


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse,
    summary="Player registration",
)
async def register(
    request: Request,
    body: RegisterRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    player = await state.accounts.register(body, state.session)

    resp = success_response(PlayerInfo.from_domain(player).model_dump(), REGISTRATION_NOTICE)
    resp.request_id = _get_request_id(request)
    return resp


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse,
    summary="Player login",
)
async def login(
    request: Request,
    body: LoginRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    player = state.accounts.login(body.email, body.password, state.session)

    resp = success_response(PlayerInfo.from_domain(player).model_dump(), LOGIN_NOTICE)
    resp.request_id = _get_request_id(request)
    return resp


@router.post(
    "/logout",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse,
    summary="Player logout",
)
async def logout(
    request: Request,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ApiResponse:
    state.accounts.logout(state.session)

    resp = success_response(SessionOut.from_session(state.session).model_dump(), LOGOUT_NOTICE)
    resp.request_id = _get_request_id(request)
    return resp
