"""
Tests for the batch drivers: roster selection, failure isolation, history
"""
import json
import pytest
from datetime import date
from decimal import Decimal

from groupware_batch.batches import attendance_create, cli, paid_acquisition, paid_grant
from groupware_batch.batches.attendance_create import run_attendance_create
from groupware_batch.batches.paid_acquisition import run_paid_acquisition
from groupware_batch.batches.paid_grant import run_paid_grant
from groupware_batch.models.attendance import Attendance
from groupware_batch.models.batch_history import BatchExecutionHistory
from groupware_batch.schemas.batch import OutcomeStatus
from groupware_batch.services.batch_history_service import is_batch_executed
from groupware_batch.services.paid_acquisition_service import is_month_reconciled

TODAY = date(2026, 10, 18)


def _outcome(report, employee):
    return next(o for o in report.outcomes if o.employee_id == employee.id)


def test_attendance_batch_skips_admin_and_inactive(db, reference_data, make_employee):
    staff = make_employee()
    admin = make_employee(department_code="00")
    retired = make_employee(active=False)

    report = run_attendance_create(db, today=TODAY)

    assert report.result is True
    assert report.processed == 1
    assert _outcome(report, staff).status == OutcomeStatus.SUCCEEDED
    assert db.query(Attendance).filter(Attendance.employee_id == admin.id).count() == 0
    assert db.query(Attendance).filter(Attendance.employee_id == retired.id).count() == 0


def test_attendance_batch_second_run_skips(db, reference_data, make_employee):
    make_employee()
    run_attendance_create(db, today=TODAY)

    report = run_attendance_create(db, today=TODAY)

    assert report.skipped == 1
    assert report.succeeded == 0


def test_unknown_department_fails_only_that_employee(db, reference_data, make_employee):
    staff = make_employee()
    orphan = make_employee(department_code="77")

    report = run_attendance_create(db, today=TODAY)

    assert _outcome(report, orphan).status == OutcomeStatus.FAILED
    assert "77" in _outcome(report, orphan).error
    assert _outcome(report, staff).status == OutcomeStatus.SUCCEEDED
    assert report.result is False


def test_history_is_recorded(db, reference_data, make_employee):
    make_employee()

    run_attendance_create(db, today=TODAY)

    history = db.query(BatchExecutionHistory).all()
    assert len(history) == 1
    assert history[0].batch_name == attendance_create.BATCH_NAME
    assert history[0].result is True
    assert history[0].succeeded == 1


def test_fatal_error_is_reported_and_recorded(db, reference_data, make_employee, monkeypatch):
    make_employee()

    def broken(*args, **kwargs):
        raise RuntimeError("master table unavailable")

    monkeypatch.setattr(attendance_create, "load_registries", broken)

    report = run_attendance_create(db, today=TODAY)

    assert report.result is False
    assert "master table unavailable" in report.fatal_error
    assert db.query(BatchExecutionHistory).one().result is False


def test_paid_acquisition_continues_after_employee_failure(db, reference_data, make_employee, add_vacation_days):
    good = make_employee(paid_leave_remaining=Decimal("10"))
    bad = make_employee(paid_leave_remaining=Decimal("10"))
    add_vacation_days(good, [date(2026, 9, 1), date(2026, 9, 2)], "01")
    add_vacation_days(bad, [date(2026, 9, 3)], "99")

    report = run_paid_acquisition(db, 2026, 9)

    assert report.target_month == "2026-09"
    assert report.failed == 1
    assert report.succeeded == 1
    assert "99" in _outcome(report, bad).error
    db.refresh(good)
    db.refresh(bad)
    assert float(good.paid_leave_remaining) == 8.0
    assert float(bad.paid_leave_remaining) == 10.0


def test_paid_acquisition_second_run_skips_reconciled(db, reference_data, make_employee, add_vacation_days):
    emp = make_employee(paid_leave_remaining=Decimal("10"))
    add_vacation_days(emp, [date(2026, 9, 1)], "01")

    first = run_paid_acquisition(db, 2026, 9)
    second = run_paid_acquisition(db, 2026, 9)

    assert first.succeeded == 1
    assert second.result is True
    assert second.succeeded == 0
    assert _outcome(second, emp).status == OutcomeStatus.SKIPPED
    assert _outcome(second, emp).detail == "already reconciled for 2026-09"
    assert is_month_reconciled(db, emp.id, 2026, 9)
    db.refresh(emp)
    assert float(emp.paid_leave_remaining) == 9.0


def test_paid_acquisition_force_runs_again(db, reference_data, make_employee, add_vacation_days):
    emp = make_employee(paid_leave_remaining=Decimal("10"))
    add_vacation_days(emp, [date(2026, 9, 1)], "01")

    run_paid_acquisition(db, 2026, 9)
    report = run_paid_acquisition(db, 2026, 9, force=True)

    assert _outcome(report, emp).status == OutcomeStatus.SUCCEEDED
    db.refresh(emp)
    assert float(emp.paid_leave_remaining) == 8.0


def test_paid_acquisition_rerun_after_partial_failure_deducts_once(
    db, reference_data, make_employee, add_vacation_days
):
    good = make_employee(paid_leave_remaining=Decimal("10"))
    bad = make_employee(paid_leave_remaining=Decimal("10"))
    add_vacation_days(good, [date(2026, 9, 1), date(2026, 9, 2)], "01")
    add_vacation_days(bad, [date(2026, 9, 3)], "99")

    first = run_paid_acquisition(db, 2026, 9)
    assert first.result is False
    assert not is_batch_executed(db, paid_acquisition.BATCH_NAME, target_month="2026-09")

    # Same data, no --force: only the failed employee is attempted again
    second = run_paid_acquisition(db, 2026, 9)
    assert _outcome(second, good).status == OutcomeStatus.SKIPPED
    assert _outcome(second, bad).status == OutcomeStatus.FAILED
    assert not is_month_reconciled(db, bad.id, 2026, 9)
    db.refresh(good)
    assert float(good.paid_leave_remaining) == 8.0

    row = db.query(Attendance).filter(Attendance.employee_id == bad.id).one()
    row.vacation_category = "01"
    db.commit()

    third = run_paid_acquisition(db, 2026, 9)
    assert third.result is True
    assert _outcome(third, good).status == OutcomeStatus.SKIPPED
    assert _outcome(third, bad).status == OutcomeStatus.SUCCEEDED
    assert is_batch_executed(db, paid_acquisition.BATCH_NAME, target_month="2026-09")
    db.refresh(good)
    db.refresh(bad)
    assert float(good.paid_leave_remaining) == 8.0
    assert float(bad.paid_leave_remaining) == 9.0

    fourth = run_paid_acquisition(db, 2026, 9)
    assert fourth.succeeded == 0
    db.refresh(bad)
    assert float(bad.paid_leave_remaining) == 9.0


def test_paid_grant_batch(db, reference_data, make_employee):
    due = make_employee(paid_leave_remaining=Decimal("3"), paid_leave_granted=10, paid_grant_date=date(2026, 10, 1))
    not_due = make_employee(paid_grant_date=date(2027, 1, 1))

    report = run_paid_grant(db, today=TODAY)

    assert _outcome(report, due).status == OutcomeStatus.SUCCEEDED
    assert _outcome(report, not_due).status == OutcomeStatus.SKIPPED
    db.refresh(due)
    assert float(due.paid_leave_remaining) == 17.0
    assert due.paid_grant_date == date(2027, 10, 1)


def test_paid_acquisition_requires_month_argument():
    with pytest.raises(SystemExit) as exc:
        paid_acquisition.main([])
    assert exc.value.code == 2


def test_paid_acquisition_rejects_bad_month_argument():
    with pytest.raises(SystemExit) as exc:
        paid_acquisition.main(["2026-13"])
    assert exc.value.code == 2


def test_process_entry_prints_report(db, reference_data, make_employee, monkeypatch, capsys):
    make_employee(paid_grant_date=date(2000, 1, 1))
    monkeypatch.setattr(cli.db_session, "SessionLocal", lambda: db)
    monkeypatch.setattr(cli.db_session, "init_schema", lambda: None)
    monkeypatch.setattr(db, "close", lambda: None)

    assert paid_grant.main([]) == 0

    out = capsys.readouterr().out
    report = json.loads(out[out.index("{"):out.rindex("}") + 1])
    assert report["batch_name"] == paid_grant.BATCH_NAME
    assert report["succeeded"] == 1


def test_process_entry_returns_1_on_startup_error(monkeypatch):
    def broken():
        raise RuntimeError("database unreachable")

    monkeypatch.setattr(cli.db_session, "init_schema", broken)

    assert attendance_create.main([]) == 1
