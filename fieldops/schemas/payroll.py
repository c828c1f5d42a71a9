"""
Payroll schemas
"""
from datetime import date, datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from fieldops.models.payroll import PayrollStatus
from fieldops.utils.datetime_utils import iso_local


class PayrollOut(BaseModel):
    id: int
    employee_id: int
    period_start: date
    period_end: date
    hours_worked: float
    distance_traveled: float
    base_pay: float
    distance_pay: float
    total_pay: float
    status: PayrollStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", when_used="always")
    def _ser_datetime(self, dt: datetime) -> str:
        return iso_local(dt)


class PayrollListResponse(BaseModel):
    items: List[PayrollOut]
    total: int


class PayrollStatusUpdate(BaseModel):
    status: PayrollStatus = Field(..., description="Next status: approved or paid")
