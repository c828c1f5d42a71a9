"""
Employee service - business logic for employee management
"""
import logging
from enum import Enum
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from fieldops.core.security import hash_password
from fieldops.models.employee import Employee, Role
from fieldops.schemas.employee import EmployeeCreate, EmployeeUpdate
from fieldops.services.audit_service import log_audit

logger = logging.getLogger(__name__)


def create_employee(db: Session, employee_data: EmployeeCreate, actor_id: int) -> Employee:
    """
    Create a new employee

    Raises:
        HTTPException: If the username is taken
    """
    existing = db.query(Employee).filter(Employee.username == employee_data.username).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Employee with username '{employee_data.username}' already exists"
        )

    employee = Employee(
        username=employee_data.username,
        name=employee_data.name,
        role=employee_data.role.value,
        specialization=employee_data.specialization.value if employee_data.specialization else None,
        active=employee_data.active,
        base_pay_rate=employee_data.base_pay_rate,
        distance_pay_rate=employee_data.distance_pay_rate,
        profile_image=employee_data.profile_image,
        password_hash=hash_password(employee_data.password) if employee_data.password else None,
    )
    db.add(employee)
    db.commit()
    db.refresh(employee)

    log_audit(
        db=db,
        actor_id=actor_id,
        action="EMPLOYEE_CREATE",
        entity_type="employees",
        entity_id=employee.id,
        meta={"username": employee.username, "role": employee.role},
    )
    return employee


def list_employees(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    role: Optional[Role] = None,
    active_only: Optional[bool] = None
) -> List[Employee]:
    query = db.query(Employee)
    if role is not None:
        query = query.filter(Employee.role == role.value)
    if active_only:
        query = query.filter(Employee.active.is_(True))
    return query.order_by(Employee.id).offset(skip).limit(limit).all()


def get_employee(db: Session, employee_id: int) -> Employee:
    """
    Raises:
        HTTPException: 404 if the employee does not exist
    """
    employee = db.query(Employee).filter(Employee.id == employee_id).first()
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )
    return employee


def update_employee(
    db: Session,
    employee_id: int,
    employee_data: EmployeeUpdate,
    actor_id: int
) -> Employee:
    """Apply only the fields present in the request (explicit nulls clear nullable fields)."""
    employee = get_employee(db, employee_id)

    changes = employee_data.model_dump(exclude_unset=True)
    password = changes.pop("password", None)
    for field, value in changes.items():
        setattr(employee, field, value.value if isinstance(value, Enum) else value)
    if password:
        employee.password_hash = hash_password(password)

    db.commit()
    db.refresh(employee)

    logger.info("employee updated: id=%s fields=%s", employee_id, sorted(changes))
    log_audit(
        db=db,
        actor_id=actor_id,
        action="EMPLOYEE_UPDATE",
        entity_type="employees",
        entity_id=employee.id,
        meta={"fields": sorted(changes) + (["password"] if password else [])},
    )
    return employee
