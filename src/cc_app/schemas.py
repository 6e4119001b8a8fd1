"""Pydantic schemas for the session/view endpoints."""

from pydantic import BaseModel

from src.cc_app.session import Session
from src.cc_common.enums import ActiveTab, TypeFilter
from src.cc_gateway.user.schemas import PlayerInfo


class UpdateViewRequest(BaseModel):
    """Partial update; omitted fields keep their current value."""

    active_tab: ActiveTab | None = None
    search_query: str | None = None
    type_filter: TypeFilter | None = None


class SessionOut(BaseModel):
    is_logged_in: bool
    current_user: PlayerInfo | None
    active_tab: str
    search_query: str
    type_filter: str

    @classmethod
    def from_session(cls, s: Session) -> "SessionOut":
        return cls(
            is_logged_in=s.is_logged_in,
            current_user=PlayerInfo.from_domain(s.current_user) if s.current_user else None,
            active_tab=s.active_tab,
            search_query=s.search_query,
            type_filter=s.type_filter,
        )
