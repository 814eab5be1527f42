"""
Domain entities and the service's error types.

Errors are tagged by kind so the HTTP layer can tell them apart:

- ``ClientError``  -- malformed or missing input, answered with 400.
- ``StorageError`` -- anything the database raised, answered with 500
  and the driver's message attached as ``details``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class SchoolServiceError(Exception):
    """Base class for errors that terminate a request."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientError(SchoolServiceError):
    """Raised when request input fails validation."""


class StorageError(SchoolServiceError):
    """Raised when the database call fails."""

    def __init__(self, details: str):
        super().__init__("Database error")
        self.details = details


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class SchoolCreate:
    """A validated school that has not been stored yet."""

    name: str
    address: str
    latitude: float
    longitude: float


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class RankedSchool:
    id: Optional[int]
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float  # km from the reference coordinate
