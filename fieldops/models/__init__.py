"""
Database models
"""
from fieldops.models.employee import Employee, Role, ServiceType
from fieldops.models.attendance import AttendanceRecord, AttendanceStatus
from fieldops.models.location import LocationFix, DailyDistance
from fieldops.models.payroll import PayrollRecord, PayrollStatus, PAYROLL_TRANSITIONS
from fieldops.models.service import ServiceOffering, Popularity
from fieldops.models.audit_log import AuditLog

__all__ = [
    "Employee",
    "Role",
    "ServiceType",
    "AttendanceRecord",
    "AttendanceStatus",
    "LocationFix",
    "DailyDistance",
    "PayrollRecord",
    "PayrollStatus",
    "PAYROLL_TRANSITIONS",
    "ServiceOffering",
    "Popularity",
    "AuditLog",
]
