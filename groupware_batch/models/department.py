"""
Department master model
"""
from sqlalchemy import Column, Integer, String, Boolean
from groupware_batch.db.base import Base


class Department(Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(10), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    admin = Column(Boolean, default=False, nullable=False)  # Members are excluded from every batch
    active = Column(Boolean, default=True, nullable=False)
