"""
Vacation category master model
"""
from sqlalchemy import Column, Integer, String, Boolean, Numeric
from sqlalchemy.sql import text
from groupware_batch.db.base import Base


class VacationCategory(Base):
    __tablename__ = "vacation_categories"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(10), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    is_paid = Column(Boolean, default=False, nullable=False)
    paid_days = Column(Numeric(3, 1), nullable=False, server_default=text("'0'"))  # 1.0 full day, 0.5 half day
