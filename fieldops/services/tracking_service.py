"""
Location tracking service - record GPS fixes and keep each day's distance current
"""
import logging
from datetime import date, datetime
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fieldops.models.location import DailyDistance, LocationFix
from fieldops.services import store
from fieldops.services.distance_service import accumulate, validate_coordinates
from fieldops.utils.datetime_utils import get_work_date, now_utc

logger = logging.getLogger(__name__)


def _validate_range(start: date, end: date) -> None:
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start_date must be less than or equal to end_date"
        )


def recompute_daily_distance(
    db: Session,
    employee_id: int,
    day: date,
    now: Optional[datetime] = None
) -> Optional[DailyDistance]:
    """
    Re-run the accumulator over all of a day's fixes and upsert the DailyDistance row

    The total is always recomputed from the full fix list, never incremented.
    No row is written until the day has at least two fixes.

    Returns:
        The created/updated DailyDistance, or None when the day has < 2 fixes
    """
    now = now or now_utc()

    try:
        return _upsert_daily_distance(db, employee_id, day, now)
    except IntegrityError:
        # A concurrent fix inserted the day's row first; recompute onto that row
        db.rollback()
        logger.info("daily distance insert raced: employee_id=%s date=%s, retrying as update", employee_id, day)
        return _upsert_daily_distance(db, employee_id, day, now)


def _upsert_daily_distance(db: Session, employee_id: int, day: date, now: datetime) -> Optional[DailyDistance]:
    fixes = store.get_fixes_for_employee_on_date(db, employee_id, day)
    if len(fixes) < 2:
        return None

    total_km = accumulate(fixes)

    daily = store.get_daily_distance(db, employee_id, day)
    if daily:
        daily.distance_km = total_km
        daily.updated_at = now
    else:
        daily = DailyDistance(
            employee_id=employee_id,
            date=day,
            distance_km=total_km,
            created_at=now,
            updated_at=now,
        )
        db.add(daily)

    db.commit()
    db.refresh(daily)
    logger.debug(
        "daily distance recomputed: employee_id=%s date=%s fixes=%s km=%s",
        employee_id, day, len(fixes), total_km,
    )
    return daily


def record_fix(
    db: Session,
    employee_id: int,
    latitude: float,
    longitude: float,
    accuracy: Optional[float] = None,
    now: Optional[datetime] = None
) -> LocationFix:
    """
    Store a GPS fix stamped with server UTC time, then refresh that day's distance

    Raises:
        InvalidInput: If the coordinates are NaN or out of range
    """
    recorded_at = now or now_utc()
    fix = LocationFix(
        employee_id=employee_id,
        timestamp=recorded_at,
        latitude=latitude,
        longitude=longitude,
        accuracy=accuracy,
    )
    validate_coordinates(fix)

    db.add(fix)
    db.commit()
    db.refresh(fix)

    recompute_daily_distance(db, employee_id, get_work_date(recorded_at), now=recorded_at)
    return fix


def list_fixes(db: Session, employee_id: int, start: date, end: date) -> List[LocationFix]:
    _validate_range(start, end)
    return store.get_fixes_for_employee_in_range(db, employee_id, start, end)


def list_daily_distances(db: Session, employee_id: int, start: date, end: date) -> List[DailyDistance]:
    _validate_range(start, end)
    return store.get_distances_for_employee_in_range(db, employee_id, start, end)
