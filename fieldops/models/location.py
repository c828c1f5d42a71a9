"""
Location tracking models: raw GPS fixes and the per-day distance derived from them
"""
from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.sql import func

from fieldops.db.base import Base


class LocationFix(Base):
    """Single GPS reading. Insert-only."""
    __tablename__ = "location_fixes"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)  # Server UTC timestamp
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    accuracy = Column(Float, nullable=True)  # meters


class DailyDistance(Base):
    """Cumulative distance for one employee on one business day; recomputed on every fix."""
    __tablename__ = "daily_distances"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)  # Business day in settings.TZ
    distance_km = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)

    __table_args__ = (
        UniqueConstraint("employee_id", "date", name="uq_daily_distance_employee_date"),
    )
