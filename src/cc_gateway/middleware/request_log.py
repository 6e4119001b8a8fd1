"""Request logging middleware.

Logs every HTTP request with method, path, status code, latency, a short
request ID for correlation, and the player logged in when the request
finished. The request_id is also injected into request.state so router
handlers can include it in ApiResponse.

Log format:
    INFO [POST] /api/v1/grounds/3/book → 200 (2ms) req_a1b2c3d4e5f6 player=Ravi
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("cc.request")


def _player_name(request: Request) -> str:
    state = getattr(request.app.state, "cricket", None)
    if state is None or state.session.current_user is None:
        return "-"
    return state.session.current_user.name


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "[%s] %s → %d (%.0fms) %s player=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.state.request_id,
            _player_name(request),
        )
        return response
