"""
Tests for payroll generation and status workflow
"""
from datetime import date, datetime, timezone

import pytest
from fastapi import status

from conftest import auth_headers, make_employee
from fieldops.models.attendance import AttendanceRecord
from fieldops.models.audit_log import AuditLog
from fieldops.models.employee import Role
from fieldops.models.location import DailyDistance
from fieldops.models.payroll import PayrollRecord

CALCULATE_URL = "/api/v1/payroll/{}/calculate?start_date=2026-03-01&end_date=2026-03-31"


def add_shift(db, employee_id, day, check_in_hour, check_out_hour=None):
    record = AttendanceRecord(
        employee_id=employee_id,
        check_in_time=datetime(2026, 3, day, check_in_hour, 0, tzinfo=timezone.utc),
        check_out_time=(
            datetime(2026, 3, day, check_out_hour, 0, tzinfo=timezone.utc)
            if check_out_hour is not None else None
        ),
        status="present",
    )
    db.add(record)
    db.commit()
    return record


def add_distance(db, employee_id, day, km):
    now = datetime.now(timezone.utc)
    row = DailyDistance(employee_id=employee_id, date=day, distance_km=km, created_at=now, updated_at=now)
    db.add(row)
    db.commit()
    return row


@pytest.fixture
def worked_month(db, technician):
    # 8h and 6h closed shifts, one open shift, and one shift outside the period
    add_shift(db, technician.id, 2, 3, 11)
    add_shift(db, technician.id, 3, 4, 10)
    add_shift(db, technician.id, 4, 4)
    db.add(AttendanceRecord(
        employee_id=technician.id,
        check_in_time=datetime(2026, 4, 1, 4, 0, tzinfo=timezone.utc),
        check_out_time=datetime(2026, 4, 1, 12, 0, tzinfo=timezone.utc),
        status="present",
    ))
    add_distance(db, technician.id, date(2026, 3, 2), 10.5)
    add_distance(db, technician.id, date(2026, 3, 3), 4.25)
    add_distance(db, technician.id, date(2026, 4, 1), 50.0)
    return technician


def test_calculate_payroll(client, db, manager, worked_month):
    response = client.post(CALCULATE_URL.format(worked_month.id), headers=auth_headers(manager))

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["employee_id"] == worked_month.id
    assert data["period_start"] == "2026-03-01"
    assert data["period_end"] == "2026-03-31"
    assert data["hours_worked"] == 14.0
    assert data["distance_traveled"] == 14.75
    assert data["base_pay"] == 1400.0
    assert data["distance_pay"] == 73.75
    assert data["total_pay"] == 1473.75
    assert data["status"] == "calculated"

    assert db.query(PayrollRecord).count() == 1
    assert db.query(AuditLog).filter(AuditLog.action == "PAYROLL_CALCULATED").count() == 1


def test_calculate_without_distance_rate(client, db, admin, helper):
    add_shift(db, helper.id, 2, 3, 11)
    add_distance(db, helper.id, date(2026, 3, 2), 22.0)

    response = client.post(CALCULATE_URL.format(helper.id), headers=auth_headers(admin))
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["distance_traveled"] == 22.0
    assert data["distance_pay"] == 0
    assert data["total_pay"] == 480.0


def test_missing_base_rate_returns_409_and_stores_nothing(client, db, admin):
    unpaid = make_employee(db, "calling1", Role.CALLING_STAFF)
    add_shift(db, unpaid.id, 2, 3, 11)

    response = client.post(CALCULATE_URL.format(unpaid.id), headers=auth_headers(admin))

    assert response.status_code == status.HTTP_409_CONFLICT
    body = response.json()
    assert body["kind"] == "InvalidConfiguration"
    assert db.query(PayrollRecord).count() == 0


def test_inverted_period_returns_400(client, db, admin, technician):
    response = client.post(
        f"/api/v1/payroll/{technician.id}/calculate?start_date=2026-03-31&end_date=2026-03-01",
        headers=auth_headers(admin),
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["kind"] == "InvalidInput"
    assert db.query(PayrollRecord).count() == 0


def test_calculate_unknown_employee_returns_404(client, admin):
    response = client.post(CALCULATE_URL.format(9999), headers=auth_headers(admin))
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_technician_cannot_calculate_payroll(client, technician):
    response = client.post(CALCULATE_URL.format(technician.id), headers=auth_headers(technician))
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_employee_sees_own_payroll(client, manager, worked_month):
    client.post(CALCULATE_URL.format(worked_month.id), headers=auth_headers(manager))

    response = client.get("/api/v1/payroll/me", headers=auth_headers(worked_month))
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["total"] == 1
    assert data["items"][0]["total_pay"] == 1473.75


def test_supervisor_lists_employee_payroll(client, manager, worked_month):
    client.post(CALCULATE_URL.format(worked_month.id), headers=auth_headers(manager))

    response = client.get(f"/api/v1/payroll/{worked_month.id}", headers=auth_headers(manager))
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["total"] == 1


def test_status_workflow(client, admin, worked_month):
    headers = auth_headers(admin)
    record_id = client.post(CALCULATE_URL.format(worked_month.id), headers=headers).json()["id"]
    url = f"/api/v1/payroll/records/{record_id}/status"

    # Cannot skip approval
    response = client.patch(url, json={"status": "paid"}, headers=headers)
    assert response.status_code == status.HTTP_409_CONFLICT

    response = client.patch(url, json={"status": "approved"}, headers=headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "approved"

    response = client.patch(url, json={"status": "paid"}, headers=headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "paid"

    # Paid is final
    response = client.patch(url, json={"status": "approved"}, headers=headers)
    assert response.status_code == status.HTTP_409_CONFLICT


def test_status_change_is_admin_only(client, manager, worked_month):
    record_id = client.post(CALCULATE_URL.format(worked_month.id), headers=auth_headers(manager)).json()["id"]

    response = client.patch(
        f"/api/v1/payroll/records/{record_id}/status",
        json={"status": "approved"},
        headers=auth_headers(manager),
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_status_change_unknown_record_returns_404(client, admin):
    response = client.patch(
        "/api/v1/payroll/records/12345/status",
        json={"status": "approved"},
        headers=auth_headers(admin),
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_infinite_stored_rate_returns_409(client, db, admin, technician):
    # Rows written before rate validation existed
    technician.base_pay_rate = float("inf")
    db.commit()
    add_shift(db, technician.id, 2, 3, 11)

    response = client.post(CALCULATE_URL.format(technician.id), headers=auth_headers(admin))

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["kind"] == "InvalidConfiguration"
    assert db.query(PayrollRecord).count() == 0


def test_infinite_stored_distance_rate_returns_409(client, db, admin, technician):
    technician.distance_pay_rate = float("inf")
    db.commit()
    add_distance(db, technician.id, date(2026, 3, 2), 3.0)

    response = client.post(CALCULATE_URL.format(technician.id), headers=auth_headers(admin))

    assert response.status_code == status.HTTP_409_CONFLICT
    assert db.query(PayrollRecord).count() == 0


def test_payroll_audit_rows_snapshot_figures(client, db, admin, worked_month):
    headers = auth_headers(admin)
    record_id = client.post(CALCULATE_URL.format(worked_month.id), headers=headers).json()["id"]
    client.patch(f"/api/v1/payroll/records/{record_id}/status", json={"status": "approved"}, headers=headers)

    calculated = db.query(AuditLog).filter(AuditLog.action == "PAYROLL_CALCULATED").one()
    assert calculated.entity_id == record_id
    assert calculated.meta_json["employee_id"] == worked_month.id
    assert calculated.meta_json["period_start"] == "2026-03-01"
    assert calculated.meta_json["hours_worked"] == 14.0
    assert calculated.meta_json["total_pay"] == 1473.75
    assert calculated.meta_json["status"] == "calculated"

    changed = db.query(AuditLog).filter(AuditLog.action == "PAYROLL_STATUS_CHANGED").one()
    assert changed.meta_json["status"] == "approved"
    assert changed.meta_json["previous_status"] == "calculated"
    assert changed.meta_json["total_pay"] == 1473.75
