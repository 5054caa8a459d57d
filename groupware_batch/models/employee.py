"""
Employee model
"""
from sqlalchemy import Column, Integer, String, Boolean, Date, Numeric
from sqlalchemy.sql import text
from groupware_batch.db.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    emp_code = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    department_code = Column(String(10), nullable=False, index=True)
    employee_type = Column(String(10), nullable=False)  # Keys the paid leave grant table
    hire_date = Column(Date, nullable=False)
    paid_leave_remaining = Column(Numeric(5, 1), nullable=False, server_default=text("'0'"))
    paid_leave_granted = Column(Integer, nullable=False, server_default=text("'0'"))  # Days given at the last grant
    paid_grant_date = Column(Date, nullable=True)  # Next grant date
    active = Column(Boolean, default=True, nullable=False)
