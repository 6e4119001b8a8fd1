"""Domain models for cc_ground — pure dataclasses, no business logic."""

from dataclasses import dataclass, field

from src.cc_common.enums import GroundAvailability


@dataclass
class Ground:
    id: str
    name: str
    location: str
    availability: str          # GroundAvailability value; only Available -> Booked
    capacity: int
    price_per_hour: float
    amenities: list[str] = field(default_factory=list)
    owner_id: str = ""
    description: str = ""
    contact: str = ""
    type: str = "box-cricket"  # GroundType value

    @property
    def is_available(self) -> bool:
        return self.availability == GroundAvailability.AVAILABLE.value
