"""
Payroll endpoints
"""
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fieldops.core.deps import SUPERVISOR_ROLES, RequestContext, get_db, get_request_context, require_roles
from fieldops.models.employee import Role
from fieldops.schemas.payroll import PayrollListResponse, PayrollOut, PayrollStatusUpdate
from fieldops.services.payroll_service import generate_payroll, list_payroll, update_payroll_status

router = APIRouter()


def _to_list(records) -> PayrollListResponse:
    return PayrollListResponse(
        items=[PayrollOut.model_validate(r) for r in records],
        total=len(records),
    )


@router.get("/me", response_model=PayrollListResponse)
async def my_payroll_endpoint(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Own payroll history."""
    return _to_list(list_payroll(db, ctx.employee_id))


@router.post("/{employee_id}/calculate", response_model=PayrollOut, status_code=201)
async def calculate_payroll_endpoint(
    employee_id: int,
    start_date: date = Query(..., description="Period start (inclusive)"),
    end_date: date = Query(..., description="Period end (inclusive)"),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(*SUPERVISOR_ROLES)),
):
    """
    Calculate and store a payroll record from the period's attendance and
    daily distances (admin/management).

    409 when the employee has no base pay rate configured.
    """
    return generate_payroll(db, employee_id, start_date, end_date, actor_id=ctx.employee_id)


@router.get("/{employee_id}", response_model=PayrollListResponse)
async def employee_payroll_endpoint(
    employee_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(*SUPERVISOR_ROLES)),
):
    return _to_list(list_payroll(db, employee_id))


@router.patch("/records/{record_id}/status", response_model=PayrollOut)
async def update_payroll_status_endpoint(
    record_id: int,
    body: PayrollStatusUpdate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(Role.ADMIN)),
):
    """Advance a payroll record: calculated -> approved -> paid (admin only)."""
    return update_payroll_status(db, record_id, body.status, actor_id=ctx.employee_id)
