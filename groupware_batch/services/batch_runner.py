"""
Batch runner - roster selection and the per-employee processing loop.

Failures are handled at two levels here:
- per employee: rollback, log with traceback, FAILED outcome, continue;
- per batch: anything escaping the loop (registry load, roster query)
  is logged and stored as report.fatal_error.
Both end up in the BatchRunReport and in batch_execution_history.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from sqlalchemy.orm import Session

from groupware_batch.core.exceptions import RegistryLookupError
from groupware_batch.models.employee import Employee
from groupware_batch.schemas.batch import BatchRunReport, EmployeeOutcome, OutcomeStatus
from groupware_batch.services.batch_history_service import record_batch_execution
from groupware_batch.services.registry_service import Registries

logger = logging.getLogger(__name__)

# Returns a (status, detail) pair for one employee
EmployeeHandler = Callable[[Employee], Tuple[OutcomeStatus, Optional[str]]]


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"


def fetch_target_employees(
    db: Session,
    registries: Registries,
) -> Tuple[List[Employee], List[EmployeeOutcome]]:
    """
    Active employees outside admin departments

    Returns:
        (employees to process, FAILED outcomes for employees whose department
        code is not in the registry)
    """
    employees = db.query(Employee).filter(Employee.active == True).order_by(Employee.id).all()
    targets = []
    rejected = []
    for employee in employees:
        try:
            department = registries.department(employee.department_code)
        except RegistryLookupError as e:
            logger.error(f"Employee {employee.id} ({employee.emp_code}) skipped: {e}")
            rejected.append(EmployeeOutcome(
                employee_id=employee.id,
                emp_code=employee.emp_code,
                status=OutcomeStatus.FAILED,
                error=_describe(e),
            ))
            continue
        if department.admin:
            continue
        targets.append(employee)
    logger.info(f"Target employees: {len(targets)} of {len(employees)} active")
    return targets, rejected


def run_for_roster(
    db: Session,
    report: BatchRunReport,
    employees: List[Employee],
    handler: EmployeeHandler,
    stage: str,
) -> None:
    """
    Run handler for each employee, one at a time, recording outcomes on the report
    """
    for employee in employees:
        # Read before the handler runs; a rollback expires the instance
        employee_id, emp_code = employee.id, employee.emp_code
        try:
            status, detail = handler(employee)
        except Exception as e:
            db.rollback()
            logger.error(f"{stage} failed for employee {employee_id} ({emp_code}): {e}", exc_info=True)
            report.outcomes.append(EmployeeOutcome(
                employee_id=employee_id,
                emp_code=emp_code,
                status=OutcomeStatus.FAILED,
                error=_describe(e),
            ))
            continue
        report.outcomes.append(EmployeeOutcome(
            employee_id=employee_id,
            emp_code=emp_code,
            status=status,
            detail=detail,
        ))


def execute_batch(
    db: Session,
    batch_name: str,
    body: Callable[[BatchRunReport], None],
    target_month: Optional[str] = None,
) -> BatchRunReport:
    """
    Run a batch body and close out its report

    Args:
        db: Database session
        batch_name: Name stored in batch_execution_history
        body: Callable filling the report (loads registries, loops the roster)
        target_month: "YYYY-MM" for month-scoped batches

    Returns:
        Finished BatchRunReport
    """
    report = BatchRunReport(
        batch_name=batch_name,
        target_month=target_month,
        started_at=datetime.now(timezone.utc),
    )
    logger.info(f"--- {batch_name} started" + (f" (target month {target_month})" if target_month else ""))
    try:
        body(report)
    except Exception as e:
        db.rollback()
        logger.error(f"{batch_name} aborted: {e}", exc_info=True)
        report.fatal_error = _describe(e)
    report.finished_at = datetime.now(timezone.utc)

    try:
        record_batch_execution(db, report)
    except Exception as e:
        db.rollback()
        logger.error(f"Could not record batch execution history for {batch_name}: {e}", exc_info=True)

    logger.info(
        f"--- {batch_name} finished: result={report.result} processed={report.processed} "
        f"succeeded={report.succeeded} skipped={report.skipped} failed={report.failed}"
    )
    return report
