"""
Payroll record model
"""
import enum

from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from fieldops.db.base import Base


class PayrollStatus(str, enum.Enum):
    CALCULATED = "calculated"
    APPROVED = "approved"
    PAID = "paid"


# Allowed forward transitions; everything else is rejected
PAYROLL_TRANSITIONS = {
    PayrollStatus.CALCULATED: PayrollStatus.APPROVED,
    PayrollStatus.APPROVED: PayrollStatus.PAID,
}


class PayrollRecord(Base):
    __tablename__ = "payroll_records"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    hours_worked = Column(Float, nullable=False)
    distance_traveled = Column(Float, nullable=False)
    base_pay = Column(Float, nullable=False)
    distance_pay = Column(Float, nullable=False)
    total_pay = Column(Float, nullable=False)
    status = Column(String, nullable=False, default=PayrollStatus.CALCULATED.value)
    # Set explicitly by the service (SQLite server defaults lose the timezone)
    created_at = Column(DateTime(timezone=True), nullable=False)

    employee = relationship("Employee", backref="payroll_records")
