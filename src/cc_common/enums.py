"""Global enums — values are the wire strings clients see."""

from enum import Enum


class GroundAvailability(str, Enum):
    AVAILABLE = "Available"
    BOOKED = "Booked"


class GroundType(str, Enum):
    FULL_GROUND = "full-ground"
    BOX_CRICKET = "box-cricket"


class TypeFilter(str, Enum):
    """Catalog type filter: a GroundType or ALL."""
    ALL = "all"
    FULL_GROUND = "full-ground"
    BOX_CRICKET = "box-cricket"


class TeamRequestStatus(str, Enum):
    OPEN = "open"
    FULL = "full"
    # Declared but never produced: no completion operation exists yet.
    COMPLETED = "completed"


class SkillLevel(str, Enum):
    ANY = "Any"
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ActiveTab(str, Enum):
    GROUNDS = "grounds"
    TEAMS = "teams"
    BOOKINGS = "bookings"
