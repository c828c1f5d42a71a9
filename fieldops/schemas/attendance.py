"""
Attendance schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from fieldops.models.attendance import AttendanceStatus
from fieldops.utils.datetime_utils import iso_local


class CheckInRequest(BaseModel):
    notes: Optional[str] = Field(None, max_length=500)


class CheckOutRequest(BaseModel):
    notes: Optional[str] = Field(None, max_length=500)


class AttendanceOut(BaseModel):
    """Attendance record output; datetimes in the business time zone."""
    id: int
    employee_id: int
    check_in_time: datetime
    check_out_time: Optional[datetime] = None
    status: AttendanceStatus
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("check_in_time", "check_out_time", when_used="always")
    def _ser_datetime(self, dt: Optional[datetime]) -> Optional[str]:
        return iso_local(dt)


class AttendanceListResponse(BaseModel):
    items: List[AttendanceOut]
    total: int
