"""
Paid acquisition record: one row per employee per reconciled month
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric, UniqueConstraint
from sqlalchemy.orm import relationship
from groupware_batch.db.base import Base


class PaidAcquisitionRecord(Base):
    __tablename__ = "paid_acquisition_records"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    target_month = Column(String(7), nullable=False)  # "YYYY-MM"
    consumed_days = Column(Numeric(5, 1), nullable=False)
    processed_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint('employee_id', 'target_month', name='uq_paid_acquisition_employee_month'),
    )

    # Relationships
    employee = relationship("Employee", backref="paid_acquisition_records")
