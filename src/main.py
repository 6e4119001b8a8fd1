"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.cc_app.api.router import router as session_router
from src.cc_app.state import build_app_state
from src.cc_booking.api.router import router as booking_router
from src.cc_common.errors import AppError
from src.cc_common.redis_client import close_redis, get_redis
from src.cc_common.response import error_response
from src.cc_gateway.api.router import router as auth_router
from src.cc_gateway.middleware.request_log import RequestLogMiddleware
from src.cc_ground.api.router import router as ground_router
from src.cc_team.api.router import router as team_router

logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: load grounds, persisted accounts and seeded teams. Shutdown: close Redis."""
    redis = await get_redis()
    app.state.cricket = await build_app_state(redis)
    yield
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(auth_router, prefix="/api/v1")
app.include_router(session_router, prefix="/api/v1")
app.include_router(ground_router, prefix="/api/v1")
app.include_router(booking_router, prefix="/api/v1")
app.include_router(team_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
