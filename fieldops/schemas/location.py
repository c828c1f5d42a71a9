"""
Location tracking and daily distance schemas
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from fieldops.utils.datetime_utils import iso_local


class LocationUpdate(BaseModel):
    """One GPS reading from a device. The server stamps the time."""
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude in decimal degrees")
    accuracy: Optional[float] = Field(None, gt=0, description="Accuracy in meters")


class LocationFixOut(BaseModel):
    id: int
    employee_id: int
    timestamp: datetime
    latitude: float
    longitude: float
    accuracy: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("timestamp", when_used="always")
    def _ser_datetime(self, dt: datetime) -> str:
        return iso_local(dt)


class DailyDistanceOut(BaseModel):
    id: int
    employee_id: int
    date: date
    distance_km: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at", when_used="always")
    def _ser_datetime(self, dt: datetime) -> str:
        return iso_local(dt)


class DailyDistanceListResponse(BaseModel):
    items: List[DailyDistanceOut]
    total: int
    total_km: float
