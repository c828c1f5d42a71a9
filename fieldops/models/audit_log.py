"""
Audit log model
"""
from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String

from fieldops.db.base import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    actor_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    action = Column(String, nullable=False)  # e.g. "ATTENDANCE_CHECK_IN", "PAYROLL_CALCULATED"
    entity_type = Column(String, nullable=False)  # e.g. "attendance_records", "payroll_records"
    entity_id = Column(Integer, nullable=True)
    meta_json = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
