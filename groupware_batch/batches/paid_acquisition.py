"""
Paid leave acquisition batch.

Deducts the paid leave taken in the target month from each non-admin
employee's remaining balance. Employees whose month is already recorded in
paid_acquisition_records are skipped unless --force is given, so a run that
failed for some employees can simply be repeated.

Usage:
  gw-paid-acquisition 2026-09
  gw-paid-acquisition 2026-09 --force
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from groupware_batch.batches.cli import run_batch_process
from groupware_batch.core.exceptions import InvalidYearMonthError
from groupware_batch.schemas.batch import BatchRunReport, OutcomeStatus
from groupware_batch.services.batch_runner import execute_batch, fetch_target_employees, run_for_roster
from groupware_batch.services.paid_acquisition_service import reconcile_paid_acquisition_once
from groupware_batch.services.registry_service import load_registries
from groupware_batch.utils.datetime_utils import month_key, parse_year_month

BATCH_NAME = "PaidAcquisitionBatch"

logger = logging.getLogger(__name__)


def run_paid_acquisition(db: Session, year: int, month: int, force: bool = False) -> BatchRunReport:
    """Run the paid leave acquisition batch for one month and return its report"""
    target = month_key(year, month)
    if force:
        logger.warning(f"{BATCH_NAME} forced for {target}; reconciled employees are deducted again")

    def body(report: BatchRunReport) -> None:
        registries = load_registries(db, places=False)
        employees, rejected = fetch_target_employees(db, registries)
        report.outcomes.extend(rejected)

        def handle(employee):
            consumed = reconcile_paid_acquisition_once(db, employee, year, month, registries, force=force)
            if consumed is None:
                return OutcomeStatus.SKIPPED, f"already reconciled for {target}"
            if not consumed:
                return OutcomeStatus.SKIPPED, "no paid leave taken"
            return OutcomeStatus.SUCCEEDED, f"deducted {consumed} days, remaining {employee.paid_leave_remaining}"

        run_for_roster(db, report, employees, handle, stage="Paid leave acquisition")

    return execute_batch(db, BATCH_NAME, body, target_month=target)


def _year_month(value: str):
    try:
        return parse_year_month(value)
    except InvalidYearMonthError as e:
        raise argparse.ArgumentTypeError(str(e))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Deduct paid leave taken in a month from remaining balances")
    parser.add_argument("month", type=_year_month, help="Target year-month (YYYY-MM)")
    parser.add_argument("--force", action="store_true", help="Deduct again for employees already reconciled for the month")
    args = parser.parse_args(argv)
    year, month = args.month
    return run_batch_process(
        BATCH_NAME,
        lambda db: run_paid_acquisition(db, year, month, force=args.force),
    )


if __name__ == "__main__":
    sys.exit(main())
