"""
Authentication endpoints
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from fieldops.core.deps import RequestContext, get_db, get_request_context
from fieldops.core.security import create_access_token, verify_password
from fieldops.models.employee import Employee
from fieldops.schemas.auth import LoginRequest, TokenResponse
from fieldops.schemas.employee import EmployeeOut
from fieldops.services.audit_service import log_audit

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return JWT token

    Validates username and password, rejects inactive employees.
    """
    employee = db.query(Employee).filter(Employee.username == login_data.username).first()

    if not employee or employee.password_hash is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    if not verify_password(login_data.password, employee.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    if not employee.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive"
        )

    access_token = create_access_token(data={
        "sub": str(employee.id),
        "username": employee.username,
        "role": employee.role,
    })

    # Audit failures must not block login
    try:
        log_audit(
            db=db,
            actor_id=employee.id,
            action="AUTH_LOGIN_SUCCESS",
            entity_type="auth",
            meta={"username": employee.username, "role": employee.role}
        )
    except Exception as e:
        db.rollback()
        logger.warning("Failed to log audit for login: %s", e)

    return TokenResponse(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=EmployeeOut)
async def me(ctx: RequestContext = Depends(get_request_context)):
    """Current authenticated employee"""
    return ctx.employee
