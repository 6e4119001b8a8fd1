"""TeamRequest domain model — pure dataclass."""

from dataclasses import dataclass, field


@dataclass
class TeamRequest:
    id: str
    captain_name: str
    team_name: str
    location: str
    date: str
    time: str
    players_needed: int            # never below 0
    skill_level: str
    description: str
    contact: str
    status: str = "open"           # TeamRequestStatus value
    current_players: list[str] = field(default_factory=list)

    @property
    def has_open_slot(self) -> bool:
        return self.players_needed > 0
