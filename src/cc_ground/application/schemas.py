"""Pydantic schemas for cc_ground API responses."""

from pydantic import BaseModel

from src.cc_common.rupees import hourly_rate_display
from src.cc_ground.domain.models import Ground


class GroundOut(BaseModel):
    id: str
    name: str
    location: str
    availability: str
    capacity: int
    price_per_hour: float
    price_display: str
    amenities: list[str]
    owner_id: str
    description: str
    contact: str
    type: str

    @classmethod
    def from_domain(cls, g: Ground) -> "GroundOut":
        return cls(
            id=g.id,
            name=g.name,
            location=g.location,
            availability=g.availability,
            capacity=g.capacity,
            price_per_hour=g.price_per_hour,
            price_display=hourly_rate_display(g.price_per_hour),
            amenities=list(g.amenities),
            owner_id=g.owner_id,
            description=g.description,
            contact=g.contact,
            type=g.type,
        )


class GroundListResponse(BaseModel):
    items: list[GroundOut]
    total: int            # after filtering
    search_query: str
    type_filter: str
