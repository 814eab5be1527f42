"""
School endpoints
================

POST /addSchool   -- register a school (name, address, coordinates)
GET  /listSchools -- every school, nearest first, from ?latitude=&longitude=
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.schemas import (
    ErrorResponse,
    RankedSchoolResponse,
    SchoolAddedResponse,
    SchoolCreateRequest,
)
from src.domain.ranking import parse_reference, rank_by_distance
from src.domain.validation import parse_school
from src.infrastructure.repositories import SchoolRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schools"])

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    500: {"model": ErrorResponse, "description": "Database error"},
}


@router.post(
    "/addSchool",
    response_model=SchoolAddedResponse,
    summary="Register a school",
    responses=_ERRORS,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": SchoolCreateRequest.model_json_schema()
                }
            },
        }
    },
)
async def add_school(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    try:
        payload = await request.json()
    except ValueError:
        payload = {}

    school = parse_school(payload)
    school_id = await SchoolRepository(db).add(school)
    logger.info("Registered school %r with id %s", school.name, school_id)
    return SchoolAddedResponse(id=school_id)


@router.get(
    "/listSchools",
    response_model=list[RankedSchoolResponse],
    summary="List schools ordered by distance",
    responses=_ERRORS,
)
async def list_schools(
    latitude: Optional[str] = Query(None, description="Reference latitude"),
    longitude: Optional[str] = Query(None, description="Reference longitude"),
    db: AsyncSession = Depends(get_db),
):
    # Reject bad coordinates before storage is touched
    origin = parse_reference(latitude, longitude)

    schools = await SchoolRepository(db).list_all()
    return rank_by_distance(origin, schools)
