"""
Payroll service - gather period data, run the calculator, persist the record
"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from fieldops.models.payroll import PAYROLL_TRANSITIONS, PayrollRecord, PayrollStatus
from fieldops.services import store
from fieldops.services.audit_service import PAYROLL_CALCULATED, PAYROLL_STATUS_CHANGED, audit_payroll
from fieldops.services.payroll_calculator import calculate_payroll
from fieldops.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)


def generate_payroll(
    db: Session,
    employee_id: int,
    period_start: date,
    period_end: date,
    actor_id: int
) -> PayrollRecord:
    """
    Calculate and persist a payroll record for one employee and period (inclusive dates)

    Every call writes a new record; callers that need one record per
    employee/period must check list_payroll first.

    Raises:
        HTTPException: 404 if the employee does not exist
        InvalidConfiguration: If the employee has no usable base pay rate
        InvalidInput: If period_start is after period_end
    """
    employee = store.get_employee(db, employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )

    attendance = store.get_attendance_for_employee_in_range(db, employee_id, period_start, period_end)
    distances = store.get_distances_for_employee_in_range(db, employee_id, period_start, period_end)

    result = calculate_payroll(employee, attendance, distances, period_start, period_end)

    record = PayrollRecord(
        employee_id=result.employee_id,
        period_start=result.period_start,
        period_end=result.period_end,
        hours_worked=result.hours_worked,
        distance_traveled=result.distance_traveled,
        base_pay=result.base_pay,
        distance_pay=result.distance_pay,
        total_pay=result.total_pay,
        status=result.status.value,
        created_at=now_utc(),
    )
    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info(
        "payroll calculated: employee_id=%s period=%s..%s hours=%s km=%s total=%s",
        employee_id, period_start, period_end,
        record.hours_worked, record.distance_traveled, record.total_pay,
    )
    audit_payroll(db, actor_id, PAYROLL_CALCULATED, record)
    return record


def list_payroll(db: Session, employee_id: int) -> List[PayrollRecord]:
    """Payroll history, newest period first."""
    return (
        db.query(PayrollRecord)
        .filter(PayrollRecord.employee_id == employee_id)
        .order_by(PayrollRecord.period_end.desc(), PayrollRecord.id.desc())
        .all()
    )


def get_payroll_record(db: Session, record_id: int) -> Optional[PayrollRecord]:
    return db.query(PayrollRecord).filter(PayrollRecord.id == record_id).first()


def update_payroll_status(
    db: Session,
    record_id: int,
    new_status: PayrollStatus,
    actor_id: int
) -> PayrollRecord:
    """
    Move a payroll record one step along calculated -> approved -> paid

    Raises:
        HTTPException: 404 if the record does not exist, 409 for any other transition
    """
    record = get_payroll_record(db, record_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payroll record not found"
        )

    current = PayrollStatus(record.status)
    if PAYROLL_TRANSITIONS.get(current) != new_status:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Cannot change payroll status from '{current.value}' to '{new_status.value}'"
        )

    record.status = new_status.value
    db.commit()
    db.refresh(record)

    logger.info("payroll status: record_id=%s %s -> %s", record_id, current.value, new_status.value)
    audit_payroll(db, actor_id, PAYROLL_STATUS_CHANGED, record, previous_status=current)
    return record
