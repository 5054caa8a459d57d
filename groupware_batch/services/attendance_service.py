"""
Attendance ledger service - monthly ledger bootstrapping.

A ledger for (employee, month) is the set of attendances rows dated inside
that month. The builder creates one row per calendar day, flagging weekends
and calendar holidays.
"""
import logging
from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from groupware_batch.models.attendance import Attendance
from groupware_batch.services.holiday_service import HolidayCalendar
from groupware_batch.services.registry_service import Registries
from groupware_batch.utils.datetime_utils import month_bounds, month_key, previous_month, today_local

logger = logging.getLogger(__name__)


def ledger_exists(db: Session, employee_id: int, year: int, month: int) -> bool:
    """True if the employee already has attendance rows in the month"""
    first, last = month_bounds(year, month)
    row = db.query(Attendance.id).filter(
        Attendance.employee_id == employee_id,
        Attendance.work_date >= first,
        Attendance.work_date <= last,
    ).first()
    return row is not None


def make_month_attendance(
    db: Session,
    employee_id: int,
    year: int,
    month: int,
    calendar: HolidayCalendar,
    registries: Registries,
) -> List[Attendance]:
    """
    Insert the initial attendance rows for every day of the month

    Args:
        db: Database session
        employee_id: Employee ID
        year: Target year
        month: Target month (1-12)
        calendar: Holiday calendar for this run
        registries: Reference registries (default place category)

    Returns:
        Created Attendance rows (flushed, not committed)
    """
    first, last = month_bounds(year, month)
    place_code = registries.default_place_code
    rows = []
    day = first
    while day <= last:
        rows.append(Attendance(
            employee_id=employee_id,
            work_date=day,
            holiday=calendar.is_holiday(day),
            place_category=place_code,
            vacation_category=None,
        ))
        day += timedelta(days=1)
    db.add_all(rows)
    db.flush()
    return rows


def ensure_monthly_ledgers(
    db: Session,
    employee_id: int,
    calendar: HolidayCalendar,
    registries: Registries,
    today: Optional[date] = None,
) -> List[str]:
    """
    Create the previous and current month ledgers when they are missing

    Returns:
        "YYYY-MM" keys of the months that were created (empty if both existed)
    """
    today = today or today_local()
    current = (today.year, today.month)
    targets = [previous_month(*current), current]

    created = []
    for year, month in targets:
        if ledger_exists(db, employee_id, year, month):
            logger.debug(f"Ledger exists for employee {employee_id} {month_key(year, month)}, skipping")
            continue
        make_month_attendance(db, employee_id, year, month, calendar, registries)
        created.append(month_key(year, month))

    if created:
        db.commit()
        logger.info(f"Created attendance ledger for employee {employee_id}: {', '.join(created)}")
    return created


def list_month_attendance(db: Session, employee_id: int, year: int, month: int) -> List[Attendance]:
    """Attendance rows of one employee for one month, ordered by date"""
    first, last = month_bounds(year, month)
    return db.query(Attendance).filter(
        Attendance.employee_id == employee_id,
        Attendance.work_date >= first,
        Attendance.work_date <= last,
    ).order_by(Attendance.work_date).all()
