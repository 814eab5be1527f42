"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

``SchoolRepository`` receives an ``AsyncSession`` (unit-of-work) and runs
exactly one SQL statement per operation.  Every database failure leaves
this module as a ``StorageError`` carrying the driver's message.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import SchoolModel
from src.domain.entities import SchoolCreate, StorageError

logger = logging.getLogger(__name__)


def _driver_message(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


@asynccontextmanager
async def _storage_errors(session: AsyncSession):
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        details = _driver_message(exc)
        logger.error("Database error: %s", details)
        await session.rollback()
        raise StorageError(details) from exc


class SchoolRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, school: SchoolCreate) -> int:
        """INSERT one row and return its auto-assigned id."""
        async with _storage_errors(self.session):
            row = SchoolModel(
                name=school.name,
                address=school.address,
                latitude=school.latitude,
                longitude=school.longitude,
            )
            self.session.add(row)
            await self.session.flush()
            await self.session.commit()
        return row.id

    async def list_all(self) -> list[SchoolModel]:
        """SELECT every row in storage order."""
        async with _storage_errors(self.session):
            result = await self.session.execute(
                select(SchoolModel).order_by(SchoolModel.id)
            )
            return list(result.scalars().all())
