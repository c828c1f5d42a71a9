"""
Employee management endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fieldops.core.deps import SUPERVISOR_ROLES, RequestContext, get_db, get_request_context, require_roles
from fieldops.models.employee import Role
from fieldops.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from fieldops.services.employee_service import (
    create_employee,
    get_employee,
    list_employees,
    update_employee,
)

router = APIRouter()


@router.post("", response_model=EmployeeOut, status_code=201)
async def create_employee_endpoint(
    employee_data: EmployeeCreate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(Role.ADMIN))
):
    """Create a new employee (admin only)"""
    return create_employee(db, employee_data, ctx.employee_id)


@router.get("", response_model=List[EmployeeOut])
async def list_employees_endpoint(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    active_only: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(*SUPERVISOR_ROLES))
):
    """List employees (admin/management)"""
    return list_employees(db, skip=skip, limit=limit, active_only=active_only)


@router.get("/role/{role}", response_model=List[EmployeeOut])
async def list_employees_by_role_endpoint(
    role: Role,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """List employees having one role (any authenticated user)"""
    return list_employees(db, role=role, limit=1000)


@router.get("/{employee_id}", response_model=EmployeeOut)
async def get_employee_endpoint(
    employee_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(*SUPERVISOR_ROLES))
):
    return get_employee(db, employee_id)


@router.patch("/{employee_id}", response_model=EmployeeOut)
async def update_employee_endpoint(
    employee_id: int,
    employee_data: EmployeeUpdate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(require_roles(Role.ADMIN))
):
    """Update an employee, including pay rates (admin only)"""
    return update_employee(db, employee_id, employee_data, ctx.employee_id)
