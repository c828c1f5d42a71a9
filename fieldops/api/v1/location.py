"""
Location tracking endpoints
"""
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fieldops.core.deps import SUPERVISOR_ROLES, RequestContext, get_db, get_request_context, require_roles
from fieldops.schemas.location import LocationFixOut, LocationUpdate
from fieldops.services.tracking_service import list_fixes, record_fix

router = APIRouter()


@router.post("", response_model=LocationFixOut, status_code=201)
async def update_location_endpoint(
    body: LocationUpdate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """
    Record the caller's current position and recompute today's distance from
    all of today's fixes.
    """
    return record_fix(
        db,
        ctx.employee_id,
        latitude=body.latitude,
        longitude=body.longitude,
        accuracy=body.accuracy,
    )


@router.get("/{employee_id}", response_model=List[LocationFixOut])
async def employee_locations_endpoint(
    employee_id: int,
    start_date: date = Query(..., description="First business day (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Last business day, inclusive (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(*SUPERVISOR_ROLES)),
):
    """An employee's fixes in a date range, oldest first (admin/management)."""
    return list_fixes(db, employee_id, start_date, end_date)
