"""
Tests for employee management endpoints
"""
import pytest
from fastapi import status

from conftest import auth_headers
from fieldops.models.audit_log import AuditLog


@pytest.fixture
def new_technician_payload():
    return {
        "username": "tech2",
        "name": "New Technician",
        "role": "technician",
        "specialization": "refrigerator",
        "base_pay_rate": 120.0,
        "distance_pay_rate": 4.5,
        "password": "fieldpass1",
    }


def test_admin_creates_employee(client, db, admin, new_technician_payload):
    response = client.post("/api/v1/employees", json=new_technician_payload, headers=auth_headers(admin))

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["username"] == "tech2"
    assert data["specialization"] == "refrigerator"
    assert data["base_pay_rate"] == 120.0
    assert data["active"] is True
    assert "password" not in data
    assert "password_hash" not in data
    assert db.query(AuditLog).filter(AuditLog.action == "EMPLOYEE_CREATE").count() == 1


def test_created_employee_can_log_in(client, admin, new_technician_payload):
    client.post("/api/v1/employees", json=new_technician_payload, headers=auth_headers(admin))

    response = client.post("/api/v1/auth/login", json={"username": "tech2", "password": "fieldpass1"})
    assert response.status_code == status.HTTP_200_OK


def test_duplicate_username_rejected(client, admin, technician, new_technician_payload):
    new_technician_payload["username"] = technician.username
    response = client.post("/api/v1/employees", json=new_technician_payload, headers=auth_headers(admin))
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_short_password_rejected(client, admin, new_technician_payload):
    new_technician_payload["password"] = "abc"
    response = client.post("/api/v1/employees", json=new_technician_payload, headers=auth_headers(admin))
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_negative_pay_rate_rejected(client, admin, new_technician_payload):
    new_technician_payload["base_pay_rate"] = -5
    response = client.post("/api/v1/employees", json=new_technician_payload, headers=auth_headers(admin))
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_manager_cannot_create_employee(client, manager, new_technician_payload):
    response = client.post("/api/v1/employees", json=new_technician_payload, headers=auth_headers(manager))
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_list_employees_for_supervisors(client, manager, technician, helper):
    response = client.get("/api/v1/employees", headers=auth_headers(manager))
    assert response.status_code == status.HTTP_200_OK
    usernames = {e["username"] for e in response.json()}
    assert {"manager1", "tech1", "helper1"} <= usernames


def test_list_employees_forbidden_for_technician(client, technician):
    response = client.get("/api/v1/employees", headers=auth_headers(technician))
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_list_by_role(client, technician, helper):
    response = client.get("/api/v1/employees/role/technician", headers=auth_headers(helper))
    assert response.status_code == status.HTTP_200_OK
    assert [e["username"] for e in response.json()] == ["tech1"]


def test_list_by_unknown_role(client, helper):
    response = client.get("/api/v1/employees/role/pilot", headers=auth_headers(helper))
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_get_employee(client, manager, technician):
    response = client.get(f"/api/v1/employees/{technician.id}", headers=auth_headers(manager))
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["distance_pay_rate"] == 5.0


def test_get_missing_employee(client, manager):
    response = client.get("/api/v1/employees/999", headers=auth_headers(manager))
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_update_pay_rates(client, admin, technician):
    response = client.patch(
        f"/api/v1/employees/{technician.id}",
        json={"base_pay_rate": 150.0, "distance_pay_rate": None},
        headers=auth_headers(admin),
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["base_pay_rate"] == 150.0
    assert data["distance_pay_rate"] is None
    assert data["name"] == "Field Technician"


def test_update_rejects_null_name(client, admin, technician):
    response = client.patch(
        f"/api/v1/employees/{technician.id}",
        json={"name": None},
        headers=auth_headers(admin),
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_deactivate_employee_blocks_login(client, admin, technician):
    client.patch(f"/api/v1/employees/{technician.id}", json={"active": False}, headers=auth_headers(admin))

    response = client.post("/api/v1/auth/login", json={"username": "tech1", "password": "testpass123"})
    assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.parametrize("raw_body", [
    '{"base_pay_rate": Infinity}',
    '{"distance_pay_rate": NaN}',
    '{"base_pay_rate": -Infinity}',
])
def test_update_rejects_non_finite_pay_rates(client, admin, technician, raw_body):
    headers = auth_headers(admin)
    headers["Content-Type"] = "application/json"
    response = client.patch(f"/api/v1/employees/{technician.id}", content=raw_body, headers=headers)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert client.get(f"/api/v1/employees/{technician.id}", headers=auth_headers(admin)).json()["base_pay_rate"] == 100.0


def test_create_rejects_infinite_pay_rate(client, admin):
    headers = auth_headers(admin)
    headers["Content-Type"] = "application/json"
    response = client.post(
        "/api/v1/employees",
        content='{"username": "tech9", "name": "T", "role": "technician", "base_pay_rate": Infinity}',
        headers=headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
