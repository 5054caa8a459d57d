"""
Paid leave grant table: days granted by employment type and tenure
"""
from sqlalchemy import Column, Integer, String, UniqueConstraint
from groupware_batch.db.base import Base


class PaidLeaveGrantDays(Base):
    __tablename__ = "paid_leave_grant_days"

    id = Column(Integer, primary_key=True, index=True)
    employee_type = Column(String(10), nullable=False, index=True)
    elapsed_months = Column(Integer, nullable=False)  # Tenure threshold in whole months
    grant_days = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint('employee_type', 'elapsed_months', name='uq_grant_days_type_months'),
    )
