"""
Employee model
"""
import enum

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from fieldops.db.base import Base


class Role(str, enum.Enum):
    ADMIN = "admin"
    MANAGEMENT = "management"
    CALLING_STAFF = "calling_staff"
    TECHNICIAN = "technician"
    HELPER = "helper"


class ServiceType(str, enum.Enum):
    AC_REPAIR = "ac_repair"
    REFRIGERATOR = "refrigerator"
    WASHING_MACHINE = "washing_machine"
    MICROWAVE = "microwave"
    DISHWASHER = "dishwasher"
    OTHER = "other"


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    specialization = Column(String, nullable=True)  # ServiceType value, technicians only
    active = Column(Boolean, default=True, nullable=False)
    # Currency per hour worked; NULL means payroll cannot be calculated yet
    base_pay_rate = Column(Float, nullable=True)
    # Currency per km; NULL means the employee does not earn distance pay
    distance_pay_rate = Column(Float, nullable=True)
    profile_image = Column(String, nullable=True)
    password_hash = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)
