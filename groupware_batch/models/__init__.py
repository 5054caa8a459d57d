"""
Database models
"""
from groupware_batch.models.department import Department
from groupware_batch.models.place_category import PlaceCategory
from groupware_batch.models.vacation_category import VacationCategory
from groupware_batch.models.employee import Employee
from groupware_batch.models.holiday import PublicHoliday
from groupware_batch.models.attendance import Attendance
from groupware_batch.models.paid_leave import PaidLeaveGrantDays
from groupware_batch.models.paid_acquisition import PaidAcquisitionRecord
from groupware_batch.models.batch_history import BatchExecutionHistory

__all__ = [
    "Department",
    "PlaceCategory",
    "VacationCategory",
    "Employee",
    "PublicHoliday",
    "Attendance",
    "PaidLeaveGrantDays",
    "PaidAcquisitionRecord",
    "BatchExecutionHistory",
]
