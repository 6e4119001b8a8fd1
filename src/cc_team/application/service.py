"""TeamApplicationService — fills captain/joiner names from the session."""

from src.cc_app.state import AppState
from src.cc_team.application.schemas import CreateTeamRequest, TeamRequestOut

CREATED_NOTICE = "Team request created successfully!"
JOINED_NOTICE = "Successfully joined the team!"
NOT_FOUND_NOTICE = "Team request not found"
FULL_NOTICE = "This team is already full"

ANONYMOUS_JOINER = "New Player"


class TeamApplicationService:
    def list_requests(self, state: AppState) -> list[TeamRequestOut]:
        return [TeamRequestOut.from_domain(r) for r in state.board.requests]

    def create_request(self, state: AppState, body: CreateTeamRequest) -> TeamRequestOut:
        session = state.session
        request = state.board.create(
            body.to_form(),
            captain_name=session.user_name,
            captain_phone=session.user_phone,
        )
        return TeamRequestOut.from_domain(request)

    def join_request(self, state: AppState, request_id: str) -> tuple[TeamRequestOut | None, str]:
        """Returns (request as it now stands, notice). A no-op join is not an error."""
        board = state.board
        joined = board.join(request_id, state.session.user_name or ANONYMOUS_JOINER)
        request = board.get(request_id)
        if request is None:
            return None, NOT_FOUND_NOTICE
        return TeamRequestOut.from_domain(request), JOINED_NOTICE if joined else FULL_NOTICE
