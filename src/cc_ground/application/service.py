"""GroundApplicationService — catalog browsing over the AppState's grounds."""

from src.cc_app.state import AppState
from src.cc_common.enums import TypeFilter
from src.cc_common.errors import GroundNotFoundError
from src.cc_ground.application.schemas import GroundListResponse, GroundOut
from src.cc_ground.domain.catalog import filter_grounds, find_ground
from src.cc_ground.domain.models import Ground


class GroundApplicationService:
    def list_grounds(
        self,
        state: AppState,
        search: str | None = None,
        type_filter: TypeFilter | None = None,
    ) -> GroundListResponse:
        """Filter by the session's search text and type filter.

        Explicit arguments are written into the session first, the way the
        search box and filter buttons update the view.
        """
        session = state.session
        if search is not None:
            session.search_query = search
        if type_filter is not None:
            session.type_filter = TypeFilter(type_filter).value

        matched = filter_grounds(state.grounds, session.search_query, session.type_filter)
        return GroundListResponse(
            items=[GroundOut.from_domain(g) for g in matched],
            total=len(matched),
            search_query=session.search_query,
            type_filter=session.type_filter,
        )

    def require_ground(self, state: AppState, ground_id: str) -> Ground:
        ground = find_ground(state.grounds, ground_id)
        if ground is None:
            raise GroundNotFoundError(ground_id)
        return ground

    def get_ground(self, state: AppState, ground_id: str) -> GroundOut:
        return GroundOut.from_domain(self.require_ground(state, ground_id))
