"""
Pytest configuration and fixtures
"""
import os

# Settings are read at import time; tests never touch a real database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-fieldops-tests")
os.environ.setdefault("APP_ENV", "local")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fieldops.core.deps import get_db
from fieldops.core.security import create_access_token, hash_password
from fieldops.db.base import Base
from fieldops.main import app
# Import all models to ensure they're registered with Base.metadata
from fieldops.models import (  # noqa: F401
    AttendanceRecord,
    AuditLog,
    DailyDistance,
    Employee,
    LocationFix,
    PayrollRecord,
    Role,
    ServiceOffering,
)

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
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_employee(
    db: Session,
    username: str,
    role: Role = Role.TECHNICIAN,
    password: str = "testpass123",
    **fields
) -> Employee:
    employee = Employee(
        username=username,
        name=fields.pop("name", username.title()),
        role=role.value,
        password_hash=hash_password(password),
        active=fields.pop("active", True),
        **fields
    )
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


def auth_headers(employee: Employee) -> dict:
    token = create_access_token({"sub": str(employee.id), "role": employee.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(db: Session) -> Employee:
    return make_employee(db, "admin1", Role.ADMIN, name="Admin User")


@pytest.fixture
def manager(db: Session) -> Employee:
    return make_employee(db, "manager1", Role.MANAGEMENT, name="Ops Manager")


@pytest.fixture
def technician(db: Session) -> Employee:
    return make_employee(
        db,
        "tech1",
        Role.TECHNICIAN,
        name="Field Technician",
        specialization="ac_repair",
        base_pay_rate=100.0,
        distance_pay_rate=5.0,
    )


@pytest.fixture
def helper(db: Session) -> Employee:
    return make_employee(db, "helper1", Role.HELPER, name="Helper", base_pay_rate=60.0)
