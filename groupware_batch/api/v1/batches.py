"""
Batch endpoints - trigger runs and read execution history
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from groupware_batch.batches.attendance_create import run_attendance_create
from groupware_batch.batches.paid_acquisition import run_paid_acquisition
from groupware_batch.batches.paid_grant import run_paid_grant
from groupware_batch.core.deps import get_db
from groupware_batch.schemas.batch import BatchExecutedOut, BatchHistoryOut, BatchRunReport
from groupware_batch.services.batch_history_service import is_batch_executed, list_batch_history
from groupware_batch.utils.datetime_utils import month_key, parse_year_month, today_local

router = APIRouter()


@router.get("/history", response_model=List[BatchHistoryOut])
def batch_history_endpoint(
    batch_name: Optional[str] = Query(None, description="Filter by batch name (e.g., PaidGrantBatch)"),
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
):
    """Recent batch executions, newest first"""
    return list_batch_history(db, batch_name=batch_name, limit=limit)


@router.get("/executed", response_model=BatchExecutedOut)
def batch_executed_endpoint(
    batch_name: str = Query(..., description="Batch name (e.g., PaidAcquisitionBatch)"),
    month: Optional[str] = Query(None, description="Target month in YYYY-MM format; omit to check runs executed this month"),
    db: Session = Depends(get_db),
):
    """
    Whether the batch has a successful run.

    With month: a successful run targeting that month. Without: a successful
    run executed during the current month in the batch timezone.
    """
    if month is not None:
        year, month_num = parse_year_month(month)
        target = month_key(year, month_num)
        executed = is_batch_executed(db, batch_name, target_month=target)
    else:
        today = today_local()
        target = month_key(today.year, today.month)
        executed = is_batch_executed(db, batch_name, today=today)
    return BatchExecutedOut(batch_name=batch_name, target_month=target, executed=executed)


@router.post("/attendance-create/run", response_model=BatchRunReport)
def run_attendance_create_endpoint(db: Session = Depends(get_db)):
    """Create previous/current month attendance ledgers"""
    return run_attendance_create(db)


@router.post("/paid-acquisition/run", response_model=BatchRunReport)
def run_paid_acquisition_endpoint(
    month: str = Query(..., description="Target month in YYYY-MM format (e.g., 2026-09)"),
    force: bool = Query(False, description="Deduct again for employees already reconciled for the month"),
    db: Session = Depends(get_db),
):
    """
    Deduct paid leave taken in the month; employees already reconciled are skipped unless force=true
    """
    year, month_num = parse_year_month(month)
    return run_paid_acquisition(db, year, month_num, force=force)


@router.post("/paid-grant/run", response_model=BatchRunReport)
def run_paid_grant_endpoint(db: Session = Depends(get_db)):
    """Grant paid leave to employees whose grant date has arrived"""
    return run_paid_grant(db)
