"""
Service catalog endpoints
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fieldops.core.deps import RequestContext, get_db, get_request_context, require_roles
from fieldops.models.employee import Role
from fieldops.schemas.service import ServiceCreate, ServiceOut
from fieldops.services.catalog_service import create_service, list_services

router = APIRouter()


@router.get("", response_model=List[ServiceOut])
async def list_services_endpoint(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    return list_services(db)


@router.post("", response_model=ServiceOut, status_code=201)
async def create_service_endpoint(
    body: ServiceCreate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(Role.ADMIN)),
):
    """Add a catalog entry (admin only)"""
    return create_service(db, body, ctx.employee_id)
