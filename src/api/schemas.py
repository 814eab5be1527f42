"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ── Requests ──────────────────────────────────────────────────────────


class SchoolCreateRequest(BaseModel):
    """Documents the ``/addSchool`` body.

    The endpoint validates the raw JSON itself so that malformed input gets
    a 400 with a specific reason instead of a generic 422.
    """

    name: str = Field(..., min_length=1, examples=["Springfield Elementary"])
    address: str = Field(..., min_length=1, examples=["19 Plympton St"])
    latitude: float = Field(..., examples=[40.7128])
    longitude: float = Field(..., examples=[-74.0060])


# ── Responses ─────────────────────────────────────────────────────────


class SchoolAddedResponse(BaseModel):
    message: str = "School added successfully"
    id: int


class RankedSchoolResponse(BaseModel):
    id: Optional[int] = None
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float = Field(..., description="Great-circle distance in km")

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
