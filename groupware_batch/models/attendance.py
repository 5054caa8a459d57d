"""
Attendance ledger model: one row per employee per calendar day
"""
from sqlalchemy import Column, Integer, Date, ForeignKey, String, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship
from groupware_batch.db.base import Base


class Attendance(Base):
    __tablename__ = "attendances"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    work_date = Column(Date, nullable=False, index=True)
    holiday = Column(Boolean, default=False, nullable=False)
    place_category = Column(String(10), nullable=True)
    vacation_category = Column(String(10), nullable=True)  # Set when the day was taken off

    __table_args__ = (
        UniqueConstraint('employee_id', 'work_date', name='uq_attendance_employee_date'),
    )

    # Relationships
    employee = relationship("Employee", backref="attendances")
