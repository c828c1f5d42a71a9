"""
Attendance record model
"""
import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from fieldops.db.base import Base


class AttendanceStatus(str, enum.Enum):
    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"


class AttendanceRecord(Base):
    __tablename__ = "attendance_records"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    check_in_time = Column(DateTime(timezone=True), nullable=False, index=True)  # Server UTC timestamp
    check_out_time = Column(DateTime(timezone=True), nullable=True)  # Set once on check-out
    status = Column(String, nullable=False, default=AttendanceStatus.PRESENT.value)
    notes = Column(String, nullable=True)

    employee = relationship("Employee", backref="attendance_records")
