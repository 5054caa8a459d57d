"""
Holiday calendar service - merges configured holidays with the public_holidays table
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, Optional, Tuple

from sqlalchemy.orm import Session

from groupware_batch.core.config import settings
from groupware_batch.models.holiday import PublicHoliday

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HolidayCalendar:
    """Recurring (month, day) holidays, built once at batch start"""
    days: FrozenSet[Tuple[int, int]]

    def is_holiday(self, d: date) -> bool:
        """True for weekends and for any (month, day) in the calendar"""
        if d.weekday() >= 5:
            return True
        return (d.month, d.day) in self.days


def list_public_holidays(db: Session):
    """List public holidays ordered by month/day"""
    return db.query(PublicHoliday).order_by(PublicHoliday.month, PublicHoliday.day).all()


def build_holiday_calendar(
    db: Session,
    defaults: Optional[Iterable[Tuple[int, int]]] = None
) -> HolidayCalendar:
    """
    Build the holiday calendar for one batch run

    Args:
        db: Database session
        defaults: Static (month, day) holidays; settings.DEFAULT_HOLIDAYS when omitted

    Returns:
        HolidayCalendar holding the union of defaults and stored holidays
    """
    if defaults is None:
        defaults = settings.get_default_holidays()
    merged = set(defaults)
    stored = list_public_holidays(db)
    merged.update((h.month, h.day) for h in stored)
    logger.info(f"Holiday calendar built: {len(merged)} days ({len(stored)} from public_holidays)")
    return HolidayCalendar(days=frozenset(merged))
