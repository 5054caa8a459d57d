"""
Paid leave grant batch.

Grants tenure-based paid leave to every non-admin employee whose next
grant date has arrived.

Usage:
  gw-paid-grant
"""
import argparse
import sys
from datetime import date
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from groupware_batch.batches.cli import run_batch_process
from groupware_batch.schemas.batch import BatchRunReport, OutcomeStatus
from groupware_batch.services.batch_runner import execute_batch, fetch_target_employees, run_for_roster
from groupware_batch.services.paid_grant_service import grant_paid_leave
from groupware_batch.services.registry_service import load_registries
from groupware_batch.utils.datetime_utils import today_local

BATCH_NAME = "PaidGrantBatch"


def run_paid_grant(db: Session, today: Optional[date] = None) -> BatchRunReport:
    """Run the paid leave grant batch and return its report"""
    today = today or today_local()

    def body(report: BatchRunReport) -> None:
        registries = load_registries(db, places=False, vacations=False)
        employees, rejected = fetch_target_employees(db, registries)
        report.outcomes.extend(rejected)

        def handle(employee):
            granted = grant_paid_leave(db, employee, today=today)
            if granted is None:
                return OutcomeStatus.SKIPPED, f"next grant on {employee.paid_grant_date}"
            return OutcomeStatus.SUCCEEDED, f"granted {granted} days, next grant on {employee.paid_grant_date}"

        run_for_roster(db, report, employees, handle, stage="Paid leave grant")

    return execute_batch(db, BATCH_NAME, body)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Grant paid leave to employees whose grant date has arrived")
    parser.parse_args(argv)
    return run_batch_process(BATCH_NAME, run_paid_grant)


if __name__ == "__main__":
    sys.exit(main())
