import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.security import decode_access_token
from app.database import JsonStore, get_store
from app.models import UserRole
from app.services.auth_service import UserService, public_user

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    store: JsonStore = Depends(get_store),
) -> dict:
    """
    Get current authenticated user from JWT token.
    Returns 401 if token is invalid or user not found.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized. Please sign in.",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    payload = decode_access_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        logger.warning("[AUTH] Invalid or expired token")
        raise credentials_exception

    user = UserService(store).find_by_email(payload["sub"])
    if user is None:
        logger.warning(f"[AUTH] User not found: {payload['sub']}")
        raise credentials_exception
    return public_user(user)


def require_role(role: UserRole):
    """Admit users with the given role; admins are always admitted."""
    def role_checker(user: dict = Depends(get_current_user)) -> dict:
        if user.get("role") not in (role.value, UserRole.ADMIN.value):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden. Insufficient permissions.",
            )
        return user
    return role_checker
