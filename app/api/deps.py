"""API Dependencies"""

from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.core.principal import Principal
from app.core.security import decode_token
from app.models.user import User

# Security scheme for bearer token
security = HTTPBearer()

__all__ = ["get_db", "get_current_principal", "require_grader", "require_admin"]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_principal(
    db: AsyncSession = Depends(get_db),
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> Principal:
    """
    Resolve the calling principal from a bearer token.

    The token's ``sub`` is a user id; role and domain are read from the
    database so a role change applies to tokens already issued.

    Raises:
        HTTPException: 401 if the token is invalid or the user is gone
    """
    payload = decode_token(credentials.credentials)
    if not payload:
        raise _unauthorized("Could not validate credentials")
    if payload.get("type") != "access":
        raise _unauthorized("Invalid token type")

    user_id_str: Optional[str] = payload.get("sub")
    if not user_id_str:
        raise _unauthorized("Could not validate credentials")
    try:
        user_id = UUID(user_id_str)
    except ValueError:
        raise _unauthorized("Invalid user ID")

    user = await db.get(User, user_id)
    if user is None:
        raise _unauthorized("User not found")

    return Principal.from_user(user)


async def require_grader(
    principal: Principal = Depends(get_current_principal)
) -> Principal:
    """Lead or admin"""
    if not principal.can_grade:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return principal


async def require_admin(
    principal: Principal = Depends(get_current_principal)
) -> Principal:
    if not principal.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return principal
