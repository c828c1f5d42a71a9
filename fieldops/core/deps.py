"""
Dependencies and guards for FastAPI endpoints

Handlers receive an explicit RequestContext (authenticated principal + role)
resolved from the bearer token; nothing is read from server-side sessions.
"""
from dataclasses import dataclass
from typing import Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from fieldops.core.security import decode_token
from fieldops.db.session import SessionLocal
from fieldops.models.employee import Employee, Role

security = HTTPBearer()


@dataclass(frozen=True)
class RequestContext:
    """Authenticated principal for one request."""
    employee: Employee
    role: Role

    @property
    def employee_id(self) -> int:
        return self.employee.id

    def has_role(self, *roles: Role) -> bool:
        return self.role in roles


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_request_context(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> RequestContext:
    """
    Resolve the current employee from the JWT bearer token
    """
    try:
        payload = decode_token(credentials.credentials)
        sub_value = payload.get("sub")
        if sub_value is None:
            raise _unauthorized("Invalid authentication credentials")
        # JWT 'sub' is a string (RFC 7519)
        employee_id = int(sub_value)
    except (ValueError, TypeError):
        raise _unauthorized("Invalid authentication credentials")

    employee = db.query(Employee).filter(Employee.id == employee_id).first()
    if employee is None:
        raise _unauthorized("User not found")

    if not employee.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user"
        )

    try:
        role = Role(employee.role)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unknown role '{employee.role}'"
        )

    return RequestContext(employee=employee, role=role)


def require_roles(*allowed_roles: Role):
    """
    Dependency factory for role-based access control

    Usage:
        @router.get("/admin-only")
        async def admin_endpoint(ctx: RequestContext = Depends(require_roles(Role.ADMIN))):
            ...
    """
    def role_checker(ctx: RequestContext = Depends(get_request_context)) -> RequestContext:
        if not ctx.has_role(*allowed_roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required roles: {[r.value for r in allowed_roles]}"
            )
        return ctx
    return role_checker


# Roles allowed to see other employees' attendance, locations and payroll
SUPERVISOR_ROLES = (Role.ADMIN, Role.MANAGEMENT)
