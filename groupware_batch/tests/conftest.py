"""
Pytest configuration and fixtures
"""
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.engine import Engine

from groupware_batch.main import app
from groupware_batch.db.base import Base
from groupware_batch.core.deps import get_db

# Import all models to ensure they're registered with Base.metadata
from groupware_batch.models import (
    Department,
    PlaceCategory,
    VacationCategory,
    Employee,
    PublicHoliday,
    Attendance,
    PaidLeaveGrantDays,
    PaidAcquisitionRecord,
    BatchExecutionHistory,
)  # noqa


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enable foreign keys for SQLite
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def reference_data(db):
    """Departments, place/vacation categories and the grant table"""
    db.add_all([
        Department(code="00", name="Administration", admin=True, active=True),
        Department(code="10", name="Sales", admin=False, active=True),
        Department(code="20", name="Development", admin=False, active=True),
        PlaceCategory(code="01", name="Head office", is_default=True),
        PlaceCategory(code="02", name="Remote", is_default=False),
        VacationCategory(code="01", name="Paid leave", is_paid=True, paid_days=Decimal("1.0")),
        VacationCategory(code="02", name="Paid leave (half)", is_paid=True, paid_days=Decimal("0.5")),
        VacationCategory(code="04", name="Special leave", is_paid=False, paid_days=Decimal("0")),
        PaidLeaveGrantDays(employee_type="A", elapsed_months=6, grant_days=10),
        PaidLeaveGrantDays(employee_type="A", elapsed_months=18, grant_days=11),
        PaidLeaveGrantDays(employee_type="A", elapsed_months=25, grant_days=14),
        PaidLeaveGrantDays(employee_type="A", elapsed_months=42, grant_days=16),
        PaidLeaveGrantDays(employee_type="B", elapsed_months=6, grant_days=7),
    ])
    db.commit()


@pytest.fixture
def make_employee(db):
    """Factory creating employees with sensible defaults"""
    counter = {"n": 0}

    def _make(**kwargs):
        counter["n"] += 1
        values = {
            "emp_code": f"E{counter['n']:03d}",
            "name": f"Employee {counter['n']}",
            "department_code": "10",
            "employee_type": "A",
            "hire_date": date(2024, 9, 18),
            "paid_leave_remaining": Decimal("0"),
            "paid_leave_granted": 0,
            "paid_grant_date": date(2027, 4, 1),
            "active": True,
        }
        values.update(kwargs)
        employee = Employee(**values)
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    return _make


@pytest.fixture
def add_vacation_days(db):
    """Insert attendance rows with a vacation category on the given dates"""
    def _add(employee, days, category):
        for d in days:
            db.add(Attendance(employee_id=employee.id, work_date=d, holiday=False, vacation_category=category))
        db.commit()

    return _add
