"""
Input validation for school registration.

Checks run in a fixed order and the first failure wins:

1. ``name``      -- non-empty string
2. ``address``   -- non-empty string
3. ``latitude``  -- finite number
4. ``longitude`` -- finite number

Coordinates are *not* range-checked; a latitude of 200 is accepted.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from .entities import ClientError, SchoolCreate

INVALID_NAME = "Invalid or missing name"
INVALID_ADDRESS = "Invalid or missing address"
INVALID_LATITUDE = "Invalid latitude"
INVALID_LONGITUDE = "Invalid longitude"


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but JSON true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def validate_school(data: Mapping[str, Any]) -> Optional[str]:
    """Return the first failing reason for *data*, or ``None`` if valid."""
    if not _is_text(data.get("name")):
        return INVALID_NAME
    if not _is_text(data.get("address")):
        return INVALID_ADDRESS
    if not _is_number(data.get("latitude")):
        return INVALID_LATITUDE
    if not _is_number(data.get("longitude")):
        return INVALID_LONGITUDE
    return None


def parse_school(data: Any) -> SchoolCreate:
    """Validate a decoded request body and build a ``SchoolCreate``.

    Anything that is not a JSON object is treated as an empty one.
    Raises ``ClientError`` carrying the validation reason.
    """
    if not isinstance(data, Mapping):
        data = {}
    reason = validate_school(data)
    if reason is not None:
        raise ClientError(reason)
    return SchoolCreate(
        name=data["name"],
        address=data["address"],
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
    )
