"""
Daily distance endpoints
"""
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fieldops.core.deps import SUPERVISOR_ROLES, RequestContext, get_db, get_request_context, require_roles
from fieldops.schemas.location import DailyDistanceListResponse, DailyDistanceOut
from fieldops.services.tracking_service import list_daily_distances
from fieldops.utils.rounding import round_half_up

router = APIRouter()


def _to_response(rows) -> DailyDistanceListResponse:
    return DailyDistanceListResponse(
        items=[DailyDistanceOut.model_validate(r) for r in rows],
        total=len(rows),
        total_km=round_half_up(sum(r.distance_km for r in rows)),
    )


@router.get("/me", response_model=DailyDistanceListResponse)
async def my_distances_endpoint(
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Own daily distances in an inclusive date range."""
    return _to_response(list_daily_distances(db, ctx.employee_id, start_date, end_date))


@router.get("/{employee_id}", response_model=DailyDistanceListResponse)
async def employee_distances_endpoint(
    employee_id: int,
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(*SUPERVISOR_ROLES)),
):
    """An employee's daily distances (admin/management)."""
    return _to_response(list_daily_distances(db, employee_id, start_date, end_date))
