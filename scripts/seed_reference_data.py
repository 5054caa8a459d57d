"""
Seed reference masters with defaults: departments, place and vacation
categories, public holidays and the statutory paid leave grant table.
Existing rows (matched by code / key) are left unchanged.

Usage:
  python scripts/seed_reference_data.py
  python scripts/seed_reference_data.py --dry-run
"""
import argparse
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy.orm import Session

from groupware_batch.db import session as db_session
from groupware_batch.models import (
    Department,
    PaidLeaveGrantDays,
    PlaceCategory,
    PublicHoliday,
    VacationCategory,
)

DEPARTMENTS = [
    ("00", "Administration", True),
    ("10", "Sales", False),
    ("20", "Development", False),
    ("30", "General Affairs", False),
]

PLACE_CATEGORIES = [
    ("01", "Head office", True),
    ("02", "Remote", False),
    ("03", "Client site", False),
]

VACATION_CATEGORIES = [
    ("01", "Paid leave (full day)", True, Decimal("1.0")),
    ("02", "Paid leave (AM)", True, Decimal("0.5")),
    ("03", "Paid leave (PM)", True, Decimal("0.5")),
    ("04", "Special leave", False, Decimal("0")),
    ("05", "Absence", False, Decimal("0")),
]

PUBLIC_HOLIDAYS = [
    (2, 11, "National Foundation Day"),
    (2, 23, "Emperor's Birthday"),
    (4, 29, "Showa Day"),
    (5, 3, "Constitution Memorial Day"),
    (5, 4, "Greenery Day"),
    (5, 5, "Children's Day"),
    (8, 11, "Mountain Day"),
    (11, 3, "Culture Day"),
    (11, 23, "Labor Thanksgiving Day"),
]

# Full-time (A) and part-time 4 days/week (B); elapsed months -> days
GRANT_TABLE = {
    "A": [(6, 10), (18, 11), (30, 12), (42, 14), (54, 16), (66, 18), (78, 20)],
    "B": [(6, 7), (18, 8), (30, 9), (42, 10), (54, 12), (66, 13), (78, 15)],
}


def seed(db: Session) -> None:
    added = 0
    for code, name, admin in DEPARTMENTS:
        if not db.query(Department).filter(Department.code == code).first():
            db.add(Department(code=code, name=name, admin=admin, active=True))
            added += 1
    for code, name, is_default in PLACE_CATEGORIES:
        if not db.query(PlaceCategory).filter(PlaceCategory.code == code).first():
            db.add(PlaceCategory(code=code, name=name, is_default=is_default))
            added += 1
    for code, name, is_paid, paid_days in VACATION_CATEGORIES:
        if not db.query(VacationCategory).filter(VacationCategory.code == code).first():
            db.add(VacationCategory(code=code, name=name, is_paid=is_paid, paid_days=paid_days))
            added += 1
    for month, day, name in PUBLIC_HOLIDAYS:
        exists = db.query(PublicHoliday).filter(PublicHoliday.month == month, PublicHoliday.day == day).first()
        if not exists:
            db.add(PublicHoliday(month=month, day=day, name=name))
            added += 1
    for employee_type, rows in GRANT_TABLE.items():
        for months, days in rows:
            exists = db.query(PaidLeaveGrantDays).filter(
                PaidLeaveGrantDays.employee_type == employee_type,
                PaidLeaveGrantDays.elapsed_months == months,
            ).first()
            if not exists:
                db.add(PaidLeaveGrantDays(employee_type=employee_type, elapsed_months=months, grant_days=days))
                added += 1
    db.flush()
    print(f"Reference data: {added} rows added")


def main():
    parser = argparse.ArgumentParser(description="Seed reference masters")
    parser.add_argument("--dry-run", action="store_true", help="Do not commit")
    args = parser.parse_args()

    db_session.init_schema()
    db: Session = db_session.SessionLocal()
    try:
        seed(db)
        if args.dry_run:
            db.rollback()
            print("Dry run: rolled back.")
        else:
            db.commit()
            print("Done.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
