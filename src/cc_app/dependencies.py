"""FastAPI dependency: get_app_state.

Usage in any router:
    from src.cc_app.dependencies import get_app_state

    @router.get("/things")
    async def things(state: Annotated[AppState, Depends(get_app_state)]):
        ...
"""

from fastapi import Request

from src.cc_app.state import AppState
from src.cc_common.errors import InternalError


def get_app_state(request: Request) -> AppState:
    """Return the AppState built by the lifespan hook."""
    state: AppState | None = getattr(request.app.state, "cricket", None)
    if state is None:
        raise InternalError("Application state is not initialised")
    return state
