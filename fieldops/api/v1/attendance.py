"""
Attendance endpoints: check-in/check-out for the caller, today's board for supervisors.
All times are server-stamped; clients never send timestamps.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fieldops.core.deps import SUPERVISOR_ROLES, RequestContext, get_db, get_request_context, require_roles
from fieldops.schemas.attendance import AttendanceListResponse, AttendanceOut, CheckInRequest, CheckOutRequest
from fieldops.services.attendance_service import (
    check_in,
    check_out,
    list_my_attendance,
    list_today,
)

router = APIRouter()


@router.post("/check-in", response_model=AttendanceOut, status_code=201)
async def check_in_endpoint(
    body: Optional[CheckInRequest] = None,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Open today's attendance record. 400 if the caller already has one today."""
    payload = body or CheckInRequest()
    return check_in(db, ctx.employee_id, notes=payload.notes)


@router.post("/check-out", response_model=AttendanceOut)
async def check_out_endpoint(
    body: Optional[CheckOutRequest] = None,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Close today's attendance record. 400 if there is none or it is already closed."""
    payload = body or CheckOutRequest()
    return check_out(db, ctx.employee_id, notes=payload.notes)


@router.get("/me", response_model=AttendanceListResponse)
async def my_attendance_endpoint(
    limit: int = Query(30, ge=1, le=366),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Own attendance history, newest first."""
    records = list_my_attendance(db, ctx.employee_id, limit=limit)
    return AttendanceListResponse(
        items=[AttendanceOut.model_validate(r) for r in records],
        total=len(records),
    )


@router.get("/today", response_model=AttendanceListResponse)
async def today_endpoint(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(*SUPERVISOR_ROLES)),
):
    """Every employee's record for the current business day (admin/management)."""
    records = list_today(db)
    return AttendanceListResponse(
        items=[AttendanceOut.model_validate(r) for r in records],
        total=len(records),
    )
