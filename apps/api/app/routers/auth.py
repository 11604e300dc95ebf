import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import UnauthenticatedError
from app.core.security import create_access_token, decode_token, verify_password
from app.models.employee import Role
from app.repositories.employee_repository import EmployeeRepository
from app.schemas.auth import Caller, LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_current_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Caller:
    """
    Build the caller from a verified bearer token.
    The role claim is the only input authorization needs; no database lookup.
    """
    if credentials is None:
        raise UnauthenticatedError("Not authenticated")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError as e:
        logger.info("Rejected token: %s", e)
        raise UnauthenticatedError() from e

    subject = payload.get("sub")
    role = Role.parse(payload.get("role"))
    if subject is None or role is None:
        raise UnauthenticatedError()

    try:
        caller_id = UUID(str(subject))
    except ValueError as e:
        raise UnauthenticatedError() from e

    return Caller(
        id=caller_id,
        email=payload.get("email") or "",
        name=payload.get("name") or "",
        role=role,
    )


@router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email + password for a bearer token."""
    employee = EmployeeRepository(db).find_by_email(str(req.email))

    if employee is None or not verify_password(req.password, employee.password_hash):
        logger.warning("Failed login for %s", req.email)
        raise UnauthenticatedError("Invalid email or password")

    token = create_access_token(
        data={
            "sub": str(employee.employee_id),
            "email": employee.email,
            "name": employee.first_name,
            "role": employee.role.value,
        }
    )
    logger.info("Login for %s (%s)", employee.email, employee.role.value)
    return LoginResponse(token=token)


@router.get("/me", response_model=Caller)
def get_current_user_info(caller: Caller = Depends(get_current_caller)):
    """Claims of the authenticated caller."""
    return caller
