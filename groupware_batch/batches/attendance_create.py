"""
Attendance ledger creation batch.

Creates the previous and current month attendance ledgers for every
non-admin employee that does not have them yet.

Usage:
  gw-attendance-create
"""
import argparse
import sys
from datetime import date
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from groupware_batch.batches.cli import run_batch_process
from groupware_batch.schemas.batch import BatchRunReport, OutcomeStatus
from groupware_batch.services.attendance_service import ensure_monthly_ledgers
from groupware_batch.services.batch_runner import execute_batch, fetch_target_employees, run_for_roster
from groupware_batch.services.holiday_service import build_holiday_calendar
from groupware_batch.services.registry_service import load_registries
from groupware_batch.utils.datetime_utils import today_local

BATCH_NAME = "AttendanceCreateBatch"


def run_attendance_create(db: Session, today: Optional[date] = None) -> BatchRunReport:
    """Run the attendance ledger creation batch and return its report"""
    today = today or today_local()

    def body(report: BatchRunReport) -> None:
        registries = load_registries(db, vacations=False)
        calendar = build_holiday_calendar(db)
        employees, rejected = fetch_target_employees(db, registries)
        report.outcomes.extend(rejected)

        def handle(employee):
            created = ensure_monthly_ledgers(db, employee.id, calendar, registries, today=today)
            if not created:
                return OutcomeStatus.SKIPPED, "ledgers already exist"
            return OutcomeStatus.SUCCEEDED, f"created {', '.join(created)}"

        run_for_roster(db, report, employees, handle, stage="Attendance ledger creation")

    return execute_batch(db, BATCH_NAME, body)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create monthly attendance ledgers for all employees")
    parser.parse_args(argv)
    return run_batch_process(BATCH_NAME, run_attendance_create)


if __name__ == "__main__":
    sys.exit(main())
