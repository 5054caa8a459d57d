"""
Work-place category master model (office, remote, client site, ...)
"""
from sqlalchemy import Column, Integer, String, Boolean
from groupware_batch.db.base import Base


class PlaceCategory(Base):
    __tablename__ = "place_categories"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(10), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    is_default = Column(Boolean, default=False, nullable=False)  # Seeded into new ledger rows
