"""
Distance ranking for the school listing.

Every stored school is annotated with its haversine distance from the
reference coordinate, then the whole collection is sorted ascending.
``sorted`` is stable, so schools at equal distance keep the order in which
storage returned them.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Protocol

from .distance import haversine_km
from .entities import ClientError, Location, RankedSchool

INVALID_REFERENCE = "Invalid or missing latitude/longitude parameters"


class StoredSchool(Protocol):
    id: Optional[int]
    name: str
    address: str
    latitude: float
    longitude: float


def _parse_coordinate(raw: Optional[str]) -> float:
    # float() would also accept digit separators such as "1_0"
    if raw is None or "_" in raw:
        raise ClientError(INVALID_REFERENCE)
    try:
        value = float(raw.strip())
    except ValueError:
        raise ClientError(INVALID_REFERENCE) from None
    if not math.isfinite(value):
        raise ClientError(INVALID_REFERENCE)
    return value


def parse_reference(
    latitude: Optional[str], longitude: Optional[str]
) -> Location:
    """Turn raw query-string values into a ``Location`` or raise ``ClientError``."""
    return Location(
        latitude=_parse_coordinate(latitude),
        longitude=_parse_coordinate(longitude),
    )


def rank_by_distance(
    origin: Location, schools: Iterable[StoredSchool]
) -> list[RankedSchool]:
    ranked = [
        RankedSchool(
            id=s.id,
            name=s.name,
            address=s.address,
            latitude=s.latitude,
            longitude=s.longitude,
            distance=haversine_km(
                origin.latitude, origin.longitude, s.latitude, s.longitude
            ),
        )
        for s in schools
    ]
    return sorted(ranked, key=lambda r: r.distance)
