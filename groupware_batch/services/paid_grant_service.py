"""
Paid leave grant service - tenure based yearly grant.

On or after the stored next grant date:
- remaining is capped at the previous grant (older carry-over lapses),
- days for (employee_type, whole months since hire) are added,
- the next grant date moves one year on from the previous grant date.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from groupware_batch.core.exceptions import EmployeeDataError, GrantTableError
from groupware_batch.models.employee import Employee
from groupware_batch.models.paid_leave import PaidLeaveGrantDays
from groupware_batch.utils.datetime_utils import add_years, months_between, today_local

logger = logging.getLogger(__name__)


def lookup_grant_days(db: Session, employee_type: str, months: int) -> int:
    """
    Days to grant for an employment type at a tenure

    Uses the row with the largest elapsed_months not above months.

    Returns:
        Grant days (0 when tenure is below the first threshold)

    Raises:
        GrantTableError: If the employment type has no rows at all
    """
    has_rows = db.query(PaidLeaveGrantDays.id).filter(
        PaidLeaveGrantDays.employee_type == employee_type
    ).first()
    if has_rows is None:
        raise GrantTableError(f"No paid leave grant table rows for employee type {employee_type!r}")

    row = db.query(PaidLeaveGrantDays).filter(
        PaidLeaveGrantDays.employee_type == employee_type,
        PaidLeaveGrantDays.elapsed_months <= months,
    ).order_by(PaidLeaveGrantDays.elapsed_months.desc()).first()
    return int(row.grant_days) if row else 0


def is_grant_due(employee: Employee, today: date) -> bool:
    """True once today reaches the stored next grant date (same day included)"""
    if employee.paid_grant_date is None:
        raise EmployeeDataError(f"Employee {employee.id} has no paid grant date")
    return today >= employee.paid_grant_date


def grant_paid_leave(
    db: Session,
    employee: Employee,
    today: Optional[date] = None,
) -> Optional[int]:
    """
    Grant paid leave to one employee when the grant date has arrived

    Args:
        db: Database session
        employee: Employee row (updated in place)
        today: Business date; today in settings.BATCH_TIMEZONE when omitted

    Returns:
        Days granted, or None when the grant is not due yet
    """
    today = today or today_local()
    if not is_grant_due(employee, today):
        return None
    if employee.hire_date is None:
        raise EmployeeDataError(f"Employee {employee.id} has no hire date")

    previous_grant = Decimal(employee.paid_leave_granted or 0)
    remaining = Decimal(str(employee.paid_leave_remaining or 0))
    remaining = min(remaining, previous_grant)

    months = months_between(employee.hire_date, today)
    granted = lookup_grant_days(db, employee.employee_type, months)
    remaining += granted

    previous_grant_date = employee.paid_grant_date
    employee.paid_grant_date = add_years(previous_grant_date, 1)
    employee.paid_leave_granted = granted
    employee.paid_leave_remaining = remaining
    db.commit()

    logger.info(
        f"Paid leave granted: employee={employee.id} type={employee.employee_type} months={months} "
        f"granted={granted} remaining={remaining} next_grant_date={employee.paid_grant_date}"
    )
    return granted
