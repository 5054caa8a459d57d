"""
Date helpers for batch business dates and year-month arithmetic.
- "Today" is taken in settings.BATCH_TIMEZONE, not the host zone.
- Year-months are passed around as (year, month) ints and keyed as "YYYY-MM".
"""
import calendar
from datetime import date, datetime
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from groupware_batch.core.config import settings
from groupware_batch.core.exceptions import InvalidYearMonthError


def today_local(tz: Optional[str] = None) -> date:
    """Current business date in the configured timezone."""
    return datetime.now(ZoneInfo(tz or settings.BATCH_TIMEZONE)).date()


def parse_year_month(value: str) -> Tuple[int, int]:
    """
    Parse an ISO year-month ("2026-09") into (year, month)

    Raises:
        InvalidYearMonthError: If the value is not YYYY-MM
    """
    parts = (value or "").strip().split("-")
    if len(parts) != 2 or len(parts[0]) != 4 or len(parts[1]) != 2:
        raise InvalidYearMonthError(f"Invalid month: {value!r}. Use YYYY-MM (e.g., 2026-09)")
    try:
        year, month = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidYearMonthError(f"Invalid month: {value!r}. Use YYYY-MM (e.g., 2026-09)")
    if month < 1 or month > 12:
        raise InvalidYearMonthError(f"Invalid month: {value!r}. Month must be between 01 and 12")
    return year, month


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def previous_month(year: int, month: int) -> Tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last day of the month."""
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def months_between(start: date, end: date) -> int:
    """
    Whole calendar months from start to end.

    A month only counts once the day-of-month is reached again, so
    2024-01-31 -> 2024-02-29 is 0 months and 2024-01-15 -> 2024-02-15 is 1.
    Negative when end is before start.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if months > 0 and end.day < start.day:
        months -= 1
    elif months < 0 and end.day > start.day:
        months += 1
    return months


def add_years(d: date, years: int) -> date:
    """Add years to d, clamping Feb 29 to Feb 28 in non-leap years."""
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return d.replace(year=d.year + years, day=28)
