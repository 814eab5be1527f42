"""
SQLAlchemy ORM model for ``schools_table``.

Coordinates are stored as plain floats; distances are computed in Python
at read time, so no spatial extension is required.
"""

from sqlalchemy import Column, Float, Integer, String

from .database import Base


class SchoolModel(Base):
    __tablename__ = "schools_table"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
