"""
Record store lookups feeding the distance accumulator and payroll calculator
"""
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from fieldops.models.attendance import AttendanceRecord
from fieldops.models.employee import Employee
from fieldops.models.location import DailyDistance, LocationFix
from fieldops.utils.datetime_utils import day_bounds_utc


def get_employee(db: Session, employee_id: int) -> Optional[Employee]:
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_fixes_for_employee_in_range(
    db: Session,
    employee_id: int,
    start: date,
    end: date
) -> List[LocationFix]:
    """Fixes recorded on business days start..end (inclusive), oldest first."""
    lower, upper = day_bounds_utc(start, end)
    return (
        db.query(LocationFix)
        .filter(
            LocationFix.employee_id == employee_id,
            LocationFix.timestamp >= lower,
            LocationFix.timestamp < upper,
        )
        .order_by(LocationFix.timestamp, LocationFix.id)
        .all()
    )


def get_fixes_for_employee_on_date(db: Session, employee_id: int, day: date) -> List[LocationFix]:
    """One business day's fixes in timestamp order (the accumulator relies on this order)."""
    return get_fixes_for_employee_in_range(db, employee_id, day, day)


def get_attendance_for_employee_in_range(
    db: Session,
    employee_id: int,
    start: date,
    end: date
) -> List[AttendanceRecord]:
    """Attendance records whose check-in falls on business days start..end (inclusive)."""
    lower, upper = day_bounds_utc(start, end)
    return (
        db.query(AttendanceRecord)
        .filter(
            AttendanceRecord.employee_id == employee_id,
            AttendanceRecord.check_in_time >= lower,
            AttendanceRecord.check_in_time < upper,
        )
        .order_by(AttendanceRecord.check_in_time)
        .all()
    )


def get_distances_for_employee_in_range(
    db: Session,
    employee_id: int,
    start: date,
    end: date
) -> List[DailyDistance]:
    return (
        db.query(DailyDistance)
        .filter(
            DailyDistance.employee_id == employee_id,
            DailyDistance.date >= start,
            DailyDistance.date <= end,
        )
        .order_by(DailyDistance.date)
        .all()
    )


def get_daily_distance(db: Session, employee_id: int, day: date) -> Optional[DailyDistance]:
    return db.query(DailyDistance).filter(
        DailyDistance.employee_id == employee_id,
        DailyDistance.date == day
    ).first()
