"""
Public holiday model (recurring month/day)
"""
from sqlalchemy import Column, Integer, String, UniqueConstraint
from groupware_batch.db.base import Base


class PublicHoliday(Base):
    __tablename__ = "public_holidays"

    id = Column(Integer, primary_key=True, index=True)
    month = Column(Integer, nullable=False)
    day = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint('month', 'day', name='uq_public_holiday_month_day'),
    )
