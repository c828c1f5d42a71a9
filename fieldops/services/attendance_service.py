"""
Attendance service - check-in/check-out for the current business day
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from fieldops.core.config import settings
from fieldops.models.attendance import AttendanceRecord, AttendanceStatus
from fieldops.services import store
from fieldops.services.audit_service import log_audit
from fieldops.utils.datetime_utils import day_bounds_utc, ensure_utc, get_work_date, now_utc, to_local

logger = logging.getLogger(__name__)


def decide_check_in_status(check_in_at: datetime) -> AttendanceStatus:
    """PRESENT up to SHIFT_START + LATE_GRACE_MINUTES (business time zone), LATE after."""
    local = to_local(check_in_at)
    shift_start = datetime.combine(local.date(), settings.get_shift_start(), tzinfo=local.tzinfo)
    if local <= shift_start + timedelta(minutes=settings.LATE_GRACE_MINUTES):
        return AttendanceStatus.PRESENT
    return AttendanceStatus.LATE


def get_today_record(db: Session, employee_id: int, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
    """The employee's record for the business day containing `now` (default: server now)."""
    today = get_work_date(now)
    records = store.get_attendance_for_employee_in_range(db, employee_id, today, today)
    return records[0] if records else None


def check_in(
    db: Session,
    employee_id: int,
    now: Optional[datetime] = None,
    *,
    notes: Optional[str] = None
) -> AttendanceRecord:
    """
    Open today's attendance record using server UTC time (never client time)

    Raises:
        HTTPException: 400 if the employee already has a record for today
    """
    now = now or now_utc()

    existing = get_today_record(db, employee_id, now)
    if existing:
        detail = "Already checked in today" if existing.check_out_time is None else "Already checked out for today"
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

    record = AttendanceRecord(
        employee_id=employee_id,
        check_in_time=now,
        check_out_time=None,
        status=decide_check_in_status(now).value,
        notes=notes,
    )
    db.add(record)
    db.commit()
    db.refresh(record)

    log_audit(
        db=db,
        actor_id=employee_id,
        action="ATTENDANCE_CHECK_IN",
        entity_type="attendance_records",
        entity_id=record.id,
        meta={"check_in_time": now, "status": record.status},
    )
    logger.info("check-in: employee_id=%s status=%s", employee_id, record.status)
    return record


def check_out(
    db: Session,
    employee_id: int,
    now: Optional[datetime] = None,
    *,
    notes: Optional[str] = None
) -> AttendanceRecord:
    """
    Close today's open attendance record

    Raises:
        HTTPException: 400 if there is no record for today, it is already
            closed, or the check-out would precede the check-in
    """
    now = now or now_utc()

    record = get_today_record(db, employee_id, now)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No check-in found for today"
        )
    if record.check_out_time is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Already checked out for today"
        )
    if now < ensure_utc(record.check_in_time):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Check-out time must not be before check-in time"
        )

    record.check_out_time = now
    if notes:
        record.notes = notes
    db.commit()
    db.refresh(record)

    log_audit(
        db=db,
        actor_id=employee_id,
        action="ATTENDANCE_CHECK_OUT",
        entity_type="attendance_records",
        entity_id=record.id,
        meta={"check_out_time": now},
    )
    logger.info("check-out: employee_id=%s record_id=%s", employee_id, record.id)
    return record


def list_my_attendance(db: Session, employee_id: int, limit: int = 30) -> List[AttendanceRecord]:
    """Most recent records first."""
    return (
        db.query(AttendanceRecord)
        .filter(AttendanceRecord.employee_id == employee_id)
        .order_by(AttendanceRecord.check_in_time.desc())
        .limit(limit)
        .all()
    )


def list_today(db: Session, now: Optional[datetime] = None) -> List[AttendanceRecord]:
    """All employees' records for the current business day."""
    lower, upper = day_bounds_utc(get_work_date(now))
    return (
        db.query(AttendanceRecord)
        .filter(
            AttendanceRecord.check_in_time >= lower,
            AttendanceRecord.check_in_time < upper,
        )
        .order_by(AttendanceRecord.check_in_time)
        .all()
    )
