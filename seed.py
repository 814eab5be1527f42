"""
Seed script -- populates the database with sample schools for reviewers.

Run against an empty database:
    python seed.py

Creates ``schools_table`` if it does not exist yet, then inserts a handful
of schools spread around Manhattan.
"""

import asyncio
import logging

from src.domain.entities import SchoolCreate
from src.infrastructure.database import Base, async_session_factory, engine
from src.infrastructure.models import SchoolModel  # noqa: F401  (registers table)
from src.infrastructure.repositories import SchoolRepository

logger = logging.getLogger("seed")

SCHOOLS = [
    SchoolCreate("Stuyvesant High School", "345 Chambers St, New York", 40.7178, -74.0139),
    SchoolCreate("PS 234 Independence School", "292 Greenwich St, New York", 40.7166, -74.0113),
    SchoolCreate("Lower Manhattan Arts Academy", "350 Grand St, New York", 40.7171, -73.9892),
    SchoolCreate("Eleanor Roosevelt High School", "411 E 76th St, New York", 40.7700, -73.9518),
    SchoolCreate("Bronx High School of Science", "75 W 205th St, Bronx", 40.8784, -73.8906),
    SchoolCreate("Brooklyn Technical High School", "29 Fort Greene Pl, Brooklyn", 40.6889, -73.9764),
]


async def seed() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        repo = SchoolRepository(session)
        for school in SCHOOLS:
            school_id = await repo.add(school)
            logger.info("  + %s (id=%d)", school.name, school_id)

    await engine.dispose()
    logger.info("Seeded %d schools", len(SCHOOLS))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    asyncio.run(seed())
