"""
Audit trail for write actions (check-in/out, employee and catalog changes, payroll)
"""
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from fieldops.models.audit_log import AuditLog
from fieldops.models.payroll import PayrollRecord
from fieldops.utils.datetime_utils import now_utc
from fieldops.utils.json_serializer import sanitize_for_json

PAYROLL_CALCULATED = "PAYROLL_CALCULATED"
PAYROLL_STATUS_CHANGED = "PAYROLL_STATUS_CHANGED"


def log_audit(
    db: Session,
    actor_id: int,
    action: str,
    entity_type: str,
    entity_id: Optional[int] = None,
    meta: Optional[Dict[str, Any]] = None
) -> AuditLog:
    """
    Append one audit row and commit it

    meta is stored as JSON; dates, enums and Decimals are converted first.
    """
    entry = AuditLog(
        actor_id=actor_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        meta_json=sanitize_for_json(meta) if meta is not None else None,
        created_at=now_utc(),
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def payroll_snapshot(record: PayrollRecord) -> Dict[str, Any]:
    """The figures a payroll audit row must preserve, as stored on the record."""
    return {
        "employee_id": record.employee_id,
        "period_start": record.period_start,
        "period_end": record.period_end,
        "hours_worked": record.hours_worked,
        "distance_traveled": record.distance_traveled,
        "base_pay": record.base_pay,
        "distance_pay": record.distance_pay,
        "total_pay": record.total_pay,
        "status": record.status,
    }


def audit_payroll(
    db: Session,
    actor_id: int,
    action: str,
    record: PayrollRecord,
    **extra: Any
) -> AuditLog:
    """Audit a payroll action with a snapshot of the record's figures plus any extra keys."""
    meta = payroll_snapshot(record)
    meta.update(extra)
    return log_audit(
        db=db,
        actor_id=actor_id,
        action=action,
        entity_type="payroll_records",
        entity_id=record.id,
        meta=meta,
    )
