"""
Shared process entry for the batch console scripts
"""
import logging
from typing import Callable

from sqlalchemy.orm import Session

from groupware_batch.core.logging import setup_logging
from groupware_batch.db import session as db_session
from groupware_batch.schemas.batch import BatchRunReport

logger = logging.getLogger(__name__)


def run_batch_process(batch_name: str, run: Callable[[Session], BatchRunReport]) -> int:
    """
    Set up logging and a session, run the batch and print its report

    Returns:
        Process exit code: 0 when the batch ran to completion (employee
        failures are in the report), 1 on a fatal startup error
    """
    setup_logging()
    logger.info(f"--- {batch_name} process start")
    exit_code = 0
    try:
        db_session.init_schema()
        db = db_session.SessionLocal()
        try:
            report = run(db)
        finally:
            db.close()
        print(report.model_dump_json(indent=2))
    except Exception as e:
        logger.error(f"{batch_name} process error: {e}", exc_info=True)
        exit_code = 1
    logger.info(f"--- {batch_name} process end")
    return exit_code
