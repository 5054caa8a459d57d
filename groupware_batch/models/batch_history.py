"""
Batch execution history model
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index
from groupware_batch.db.base import Base


class BatchExecutionHistory(Base):
    __tablename__ = "batch_execution_history"

    id = Column(Integer, primary_key=True, index=True)
    batch_name = Column(String(50), nullable=False)
    target_month = Column(String(7), nullable=True)  # "YYYY-MM" for month-scoped batches
    result = Column(Boolean, nullable=False)
    processed = Column(Integer, nullable=False, default=0)
    succeeded = Column(Integer, nullable=False, default=0)
    failed = Column(Integer, nullable=False, default=0)
    skipped = Column(Integer, nullable=False, default=0)
    # Set explicitly; SQLite server defaults are unreliable for timezone-aware columns
    executed_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index('ix_batch_history_name_month', 'batch_name', 'target_month'),
    )
