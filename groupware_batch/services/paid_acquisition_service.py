"""
Paid leave acquisition service - deducts paid leave taken in a month.

Each employee-month is recorded in paid_acquisition_records so a re-run of
the batch deducts only for employees that were not yet reconciled.
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from groupware_batch.models.attendance import Attendance
from groupware_batch.models.employee import Employee
from groupware_batch.models.paid_acquisition import PaidAcquisitionRecord
from groupware_batch.services.registry_service import Registries
from groupware_batch.utils.datetime_utils import month_bounds, month_key

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def find_vacation_attendance(db: Session, employee_id: int, year: int, month: int):
    """Attendance rows in the month that carry a vacation category"""
    first, last = month_bounds(year, month)
    return db.query(Attendance).filter(
        Attendance.employee_id == employee_id,
        Attendance.work_date >= first,
        Attendance.work_date <= last,
        Attendance.vacation_category.isnot(None),
    ).order_by(Attendance.work_date).all()


def sum_paid_days(attendances: Iterable[Attendance], registries: Registries) -> Decimal:
    """
    Sum paid-day values of rows whose vacation category is paid

    Raises:
        RegistryLookupError: If a row references an unknown vacation category
    """
    total = ZERO
    for row in attendances:
        category = registries.vacation_category(row.vacation_category)
        if category.is_paid:
            total += category.paid_days
    return total


def _deduct(db: Session, employee: Employee, year: int, month: int, registries: Registries) -> Decimal:
    rows = find_vacation_attendance(db, employee.id, year, month)
    consumed = sum_paid_days(rows, registries)
    if consumed <= ZERO:
        return ZERO

    before = Decimal(str(employee.paid_leave_remaining or 0))
    remaining = max(ZERO, before - consumed)
    employee.paid_leave_remaining = remaining

    logger.info(
        f"Paid leave acquired: employee={employee.id} month={month_key(year, month)} "
        f"consumed={consumed} remaining {before} -> {remaining}"
    )
    return consumed


def reconcile_paid_acquisition(
    db: Session,
    employee: Employee,
    year: int,
    month: int,
    registries: Registries,
) -> Decimal:
    """
    Subtract paid leave consumed in the month from the employee's balance

    The balance is floored at zero and only written when something was consumed.
    Does not record the month; see reconcile_paid_acquisition_once.

    Returns:
        Paid days consumed in the month
    """
    consumed = _deduct(db, employee, year, month, registries)
    if consumed > ZERO:
        db.commit()
    return consumed


def get_acquisition_record(db: Session, employee_id: int, year: int, month: int) -> Optional[PaidAcquisitionRecord]:
    return db.query(PaidAcquisitionRecord).filter(
        PaidAcquisitionRecord.employee_id == employee_id,
        PaidAcquisitionRecord.target_month == month_key(year, month),
    ).first()


def is_month_reconciled(db: Session, employee_id: int, year: int, month: int) -> bool:
    """True when the employee's paid leave for the month was already deducted"""
    return get_acquisition_record(db, employee_id, year, month) is not None


def reconcile_paid_acquisition_once(
    db: Session,
    employee: Employee,
    year: int,
    month: int,
    registries: Registries,
    force: bool = False,
) -> Optional[Decimal]:
    """
    Deduct the month's paid leave at most once per employee

    The deduction and its paid_acquisition_records row are committed together,
    so a failed employee leaves no record and is picked up by the next run.

    Args:
        force: Deduct again even if the month is already recorded

    Returns:
        Paid days consumed, or None if the month was already reconciled
    """
    record = get_acquisition_record(db, employee.id, year, month)
    if record is not None and not force:
        logger.info(f"Paid leave already reconciled: employee={employee.id} month={record.target_month}")
        return None

    consumed = _deduct(db, employee, year, month, registries)
    now = datetime.now(timezone.utc)
    if record is None:
        db.add(PaidAcquisitionRecord(
            employee_id=employee.id,
            target_month=month_key(year, month),
            consumed_days=consumed,
            processed_at=now,
        ))
    else:
        record.consumed_days = consumed
        record.processed_at = now
    db.commit()
    return consumed
