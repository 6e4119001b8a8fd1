"""Fixture Loader: raw spreadsheet rows -> Ground records.

Every derived attribute hangs off one threshold: a price above
FULL_GROUND_PRICE_THRESHOLD makes a full ground, anything else (missing
price included, which counts as 0) a box-cricket facility.

Availability is the only random attribute. The RNG is passed in so a seeded
``random.Random`` gives reproducible catalogs.
"""

import json
import random
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from src.cc_common.enums import GroundAvailability, GroundType
from src.cc_ground.domain.models import Ground

FULL_GROUND_PRICE_THRESHOLD = 1000
BOOKED_PROBABILITY = 0.3

FULL_GROUND_CAPACITY = 200
BOX_CRICKET_CAPACITY = 50

FULL_GROUND_AMENITIES = ("Parking", "Changing Rooms", "Cafeteria", "Night Lights")
BOX_CRICKET_AMENITIES = ("Indoor Facility", "AC", "Equipment")

FULL_GROUND_DESCRIPTION = "Professional cricket ground with turf wickets"
BOX_CRICKET_DESCRIPTION = "Box cricket facility with modern amenities"

_PRICE_KEY = "Price per Hour"
_WHITESPACE = re.compile(r"\s+")


def _raw_price(record: Mapping[str, Any]) -> float:
    """Read the hourly price; the sheet export sometimes pads the header with a space."""
    for key, value in record.items():
        if key.strip() == _PRICE_KEY:
            return value or 0
    return 0


def _contact_for(name: str) -> str:
    return f"contact@{_WHITESPACE.sub('', name.lower())}.com"


def build_ground(position: int, record: Mapping[str, Any], rng: random.Random) -> Ground:
    """Derive one Ground. ``position`` is 1-based and becomes the id."""
    price = _raw_price(record)
    name = record["Name"]
    is_full = price > FULL_GROUND_PRICE_THRESHOLD
    availability = (
        GroundAvailability.AVAILABLE if rng.random() > BOOKED_PROBABILITY
        else GroundAvailability.BOOKED
    )
    return Ground(
        id=str(position),
        name=name,
        location=record["Location"],
        availability=availability.value,
        capacity=FULL_GROUND_CAPACITY if is_full else BOX_CRICKET_CAPACITY,
        price_per_hour=price,
        amenities=list(FULL_GROUND_AMENITIES if is_full else BOX_CRICKET_AMENITIES),
        owner_id=f"owner{position}",
        description=FULL_GROUND_DESCRIPTION if is_full else BOX_CRICKET_DESCRIPTION,
        contact=_contact_for(name),
        type=(GroundType.FULL_GROUND if is_full else GroundType.BOX_CRICKET).value,
    )


def load_grounds(
    records: Iterable[Mapping[str, Any]],
    rng: random.Random | None = None,
) -> list[Ground]:
    """Transform raw rows in order; ids are "1", "2", ... by position."""
    rng = rng or random.Random()
    return [build_ground(i, record, rng) for i, record in enumerate(records, start=1)]


def read_fixture(path: Path) -> list[dict[str, Any]]:
    """Read the fixture file: a bare array or the sheet export's {"Sheet1": [...]}."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        return list(data.get("Sheet1", []))
    return list(data)
