"""
Employee schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from fieldops.core.security import validate_password
from fieldops.models.employee import Role, ServiceType
from fieldops.utils.datetime_utils import iso_local


class EmployeeCreate(BaseModel):
    """Schema for creating an employee"""
    username: str = Field(..., min_length=1, description="Login name (unique)")
    name: str = Field(..., min_length=1, description="Employee name")
    role: Role = Field(..., description="Employee role")
    specialization: Optional[ServiceType] = Field(None, description="Service specialization (technicians)")
    active: bool = Field(default=True, description="Employee active status")
    base_pay_rate: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Base pay per hour worked")
    distance_pay_rate: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Pay per km traveled; omit if not eligible")
    profile_image: Optional[str] = None
    password: Optional[str] = Field(None, description="Employee password (optional)")

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v):
        """Normalize and validate password; blank means no password"""
        if v is None or not str(v).strip():
            return None
        return validate_password(v)


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee. Pay rates accept null to clear them."""
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[Role] = None
    specialization: Optional[ServiceType] = None
    active: Optional[bool] = None
    base_pay_rate: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    distance_pay_rate: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    profile_image: Optional[str] = None
    password: Optional[str] = None

    @field_validator("name", "role", "active")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v):
        if v is None or not str(v).strip():
            return None
        return validate_password(v)


class EmployeeOut(BaseModel):
    """Schema for employee output (never includes the password hash)"""
    id: int
    username: str
    name: str
    role: Role
    specialization: Optional[ServiceType] = None
    active: bool
    base_pay_rate: Optional[float] = None
    distance_pay_rate: Optional[float] = None
    profile_image: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at", when_used="always")
    def _ser_datetime(self, dt: Optional[datetime]) -> Optional[str]:
        return iso_local(dt)
