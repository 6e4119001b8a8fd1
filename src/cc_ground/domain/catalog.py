"""Catalog Filter — pure search/type filter over the ground list."""

from collections.abc import Sequence

from src.cc_common.enums import TypeFilter
from src.cc_ground.domain.models import Ground


def matches_search(ground: Ground, search: str) -> bool:
    needle = search.lower()
    return needle in ground.name.lower() or needle in ground.location.lower()


def matches_type(ground: Ground, type_filter: str) -> bool:
    return type_filter == TypeFilter.ALL.value or ground.type == type_filter


def filter_grounds(
    grounds: Sequence[Ground],
    search: str = "",
    type_filter: str = TypeFilter.ALL.value,
) -> list[Ground]:
    """Grounds whose name or location contains ``search`` (case-insensitive)
    and whose type passes ``type_filter``. Input order is kept; nothing is mutated.
    """
    type_value = TypeFilter(type_filter).value
    return [g for g in grounds if matches_search(g, search) and matches_type(g, type_value)]


def find_ground(grounds: Sequence[Ground], ground_id: str) -> Ground | None:
    return next((g for g in grounds if g.id == ground_id), None)
