"""
Tests for the batch HTTP endpoints
"""
from datetime import date
from decimal import Decimal
from fastapi import status


def test_health_check(client):
    response = client.get("/api/v1/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ok"


def test_run_paid_grant_endpoint(client, reference_data, make_employee):
    make_employee(hire_date=date(2020, 1, 6), paid_grant_date=date(2021, 1, 6))

    response = client.post("/api/v1/batches/paid-grant/run")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["batch_name"] == "PaidGrantBatch"
    assert data["succeeded"] == 1
    assert data["result"] is True


def test_run_paid_acquisition_endpoint(client, db, reference_data, make_employee, add_vacation_days):
    emp = make_employee(paid_leave_remaining=Decimal("5"))
    add_vacation_days(emp, [date(2026, 9, 7)], "02")

    response = client.post("/api/v1/batches/paid-acquisition/run?month=2026-09")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["target_month"] == "2026-09"
    db.refresh(emp)
    assert float(emp.paid_leave_remaining) == 4.5


def test_run_paid_acquisition_rejects_bad_month(client):
    response = client.post("/api/v1/batches/paid-acquisition/run?month=2026-9")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["error"] is True
    assert "YYYY-MM" in body["detail"]


def test_run_paid_acquisition_requires_month(client):
    response = client.post("/api/v1/batches/paid-acquisition/run")

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_batch_history_endpoint(client, reference_data, make_employee):
    make_employee()
    client.post("/api/v1/batches/attendance-create/run")
    client.post("/api/v1/batches/paid-grant/run")

    response = client.get("/api/v1/batches/history")
    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()) == 2

    response = client.get("/api/v1/batches/history?batch_name=AttendanceCreateBatch")
    data = response.json()
    assert len(data) == 1
    assert data[0]["batch_name"] == "AttendanceCreateBatch"
    assert data[0]["succeeded"] == 1


def test_batch_executed_endpoint_for_month(client, reference_data, make_employee):
    make_employee()

    before = client.get("/api/v1/batches/executed?batch_name=PaidAcquisitionBatch&month=2026-09")
    client.post("/api/v1/batches/paid-acquisition/run?month=2026-09")
    after = client.get("/api/v1/batches/executed?batch_name=PaidAcquisitionBatch&month=2026-09")

    assert before.status_code == status.HTTP_200_OK
    assert before.json()["executed"] is False
    assert after.json() == {"batch_name": "PaidAcquisitionBatch", "target_month": "2026-09", "executed": True}


def test_batch_executed_endpoint_current_month(client, reference_data, make_employee):
    make_employee()
    client.post("/api/v1/batches/paid-grant/run")

    response = client.get("/api/v1/batches/executed?batch_name=PaidGrantBatch")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["executed"] is True


def test_batch_executed_endpoint_rejects_bad_month(client):
    response = client.get("/api/v1/batches/executed?batch_name=PaidGrantBatch&month=202609")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
