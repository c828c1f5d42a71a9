"""
Timezone-aware datetime helpers.
- Store and compute in UTC in DB.
- Business days (attendance dates, daily distances) are calendar dates in settings.TZ.
- API responses expose datetimes in settings.TZ with an explicit offset.
"""
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from fieldops.core.config import settings

UTC = timezone.utc


def business_tz() -> ZoneInfo:
    return ZoneInfo(settings.TZ)


def now_utc() -> datetime:
    """Current time in UTC (timezone-aware). Use for check-in/out, fix timestamps, created_at."""
    return datetime.now(UTC)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """If dt is naive, treat as UTC and return timezone-aware UTC. If already aware, convert to UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_local(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert to the business time zone. Naive datetimes are treated as UTC."""
    if dt is None:
        return None
    return ensure_utc(dt).astimezone(business_tz())


def iso_local(dt: Optional[datetime]) -> Optional[str]:
    """ISO-8601 in the business time zone with offset. Use for API response datetime fields."""
    if dt is None:
        return None
    return to_local(dt).isoformat()


def get_work_date(utc_now: Optional[datetime] = None) -> date:
    """Business date for the given UTC time (default now)."""
    return to_local(utc_now or now_utc()).date()


def day_bounds_utc(start: date, end: Optional[date] = None) -> Tuple[datetime, datetime]:
    """
    UTC half-open interval [from, to) covering business days start..end inclusive.

    DST-safe: each bound is localized separately.
    """
    end = end or start
    tz = business_tz()
    lower = datetime.combine(start, time.min, tzinfo=tz)
    upper = datetime.combine(end + timedelta(days=1), time.min, tzinfo=tz)
    return lower.astimezone(UTC), upper.astimezone(UTC)
