"""
Batch run report schemas
"""
import enum
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, computed_field


class OutcomeStatus(str, enum.Enum):
    SUCCEEDED = "SUCCEEDED"
    SKIPPED = "SKIPPED"  # Nothing to do for this employee (ledger present, grant not due, ...)
    FAILED = "FAILED"


class EmployeeOutcome(BaseModel):
    """Result of running one batch stage for one employee"""
    employee_id: Optional[int] = None
    emp_code: Optional[str] = None
    status: OutcomeStatus
    detail: Optional[str] = Field(None, description="What was done, e.g. created months or granted days")
    error: Optional[str] = Field(None, description="Failure reason when status is FAILED")


class BatchRunReport(BaseModel):
    """Machine-readable summary of one batch execution"""
    batch_name: str
    target_month: Optional[str] = Field(None, description="YYYY-MM for month-scoped batches")
    started_at: datetime
    finished_at: Optional[datetime] = None
    fatal_error: Optional[str] = Field(None, description="Set when the batch aborted before or during the roster loop")
    outcomes: List[EmployeeOutcome] = Field(default_factory=list)

    @computed_field
    @property
    def processed(self) -> int:
        return len(self.outcomes)

    @computed_field
    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.status == OutcomeStatus.SUCCEEDED)

    @computed_field
    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if o.status == OutcomeStatus.SKIPPED)

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.status == OutcomeStatus.FAILED)

    @computed_field
    @property
    def result(self) -> bool:
        """True when the run finished and no employee failed"""
        return self.fatal_error is None and self.failed == 0


class BatchHistoryOut(BaseModel):
    """Schema for batch execution history output"""
    id: int
    batch_name: str
    target_month: Optional[str]
    result: bool
    processed: int
    succeeded: int
    failed: int
    skipped: int
    executed_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BatchExecutedOut(BaseModel):
    """Whether a batch already has a successful run for the month"""
    batch_name: str
    target_month: str
    executed: bool
