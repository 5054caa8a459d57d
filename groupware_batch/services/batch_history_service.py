"""
Batch execution history service
"""
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple
from zoneinfo import ZoneInfo
from sqlalchemy.orm import Session
from groupware_batch.core.config import settings
from groupware_batch.models.batch_history import BatchExecutionHistory
from groupware_batch.schemas.batch import BatchRunReport
from groupware_batch.utils.datetime_utils import today_local


def record_batch_execution(db: Session, report: BatchRunReport) -> BatchExecutionHistory:
    """
    Create a batch execution history entry from a run report

    Args:
        db: Database session
        report: Finished batch run report

    Returns:
        Created BatchExecutionHistory instance
    """
    history = BatchExecutionHistory(
        batch_name=report.batch_name,
        target_month=report.target_month,
        result=report.result,
        processed=report.processed,
        succeeded=report.succeeded,
        failed=report.failed,
        skipped=report.skipped,
        executed_at=report.finished_at or datetime.now(timezone.utc),
    )
    db.add(history)
    db.commit()
    db.refresh(history)
    return history


def _local_month_range(today: date) -> Tuple[datetime, datetime]:
    """UTC instants bounding the local calendar month containing today"""
    tz = ZoneInfo(settings.BATCH_TIMEZONE)
    next_year, next_month = (today.year + 1, 1) if today.month == 12 else (today.year, today.month + 1)
    start = datetime(today.year, today.month, 1, tzinfo=tz)
    end = datetime(next_year, next_month, 1, tzinfo=tz)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)


def is_batch_executed(
    db: Session,
    batch_name: str,
    target_month: Optional[str] = None,
    today: Optional[date] = None,
) -> bool:
    """
    Check whether a batch already succeeded

    With target_month: any successful run for that month.
    Without: any successful run executed during the current month in
    BATCH_TIMEZONE.
    """
    query = db.query(BatchExecutionHistory.id).filter(
        BatchExecutionHistory.batch_name == batch_name,
        BatchExecutionHistory.result == True,
    )
    if target_month is not None:
        query = query.filter(BatchExecutionHistory.target_month == target_month)
    else:
        today = today or today_local()
        start, end = _local_month_range(today)
        query = query.filter(
            BatchExecutionHistory.executed_at >= start,
            BatchExecutionHistory.executed_at < end,
        )
    return query.first() is not None


def list_batch_history(
    db: Session,
    batch_name: Optional[str] = None,
    limit: int = 50
) -> List[BatchExecutionHistory]:
    """List recent executions, newest first"""
    query = db.query(BatchExecutionHistory)
    if batch_name:
        query = query.filter(BatchExecutionHistory.batch_name == batch_name)
    return query.order_by(BatchExecutionHistory.executed_at.desc(), BatchExecutionHistory.id.desc()).limit(limit).all()
