"""
Authentication Service
Handles user creation and authentication against the `users` collection.
"""
import logging
from typing import Optional

from app.core.security import get_password_hash, verify_password
from app.models import UserRole
from app.services.record_service import RecordService, require_text

logger = logging.getLogger(__name__)

USER_ROLES = tuple(role.value for role in UserRole)


def public_user(user: dict) -> dict:
    """User record without its password hash."""
    return {k: v for k, v in user.items() if k != "hashedPassword"}


class UserService(RecordService):
    collection = "users"
    entity = "User"
    id_prefix = "user"

    def validate(self, draft):
        errors = []
        require_text(draft, "email", "Email is required", errors)
        require_text(draft, "password", "Password is required", errors)
        role = draft.get("role")
        if role and role not in USER_ROLES:
            errors.append(f"Role must be one of: {', '.join(USER_ROLES)}")
        email = (draft.get("email") or "").strip().lower()
        if email and self.find_by_email(email) is not None:
            errors.append("Email already registered")
        return errors

    def apply_defaults(self, record, data, now):
        record["email"] = record["email"].strip().lower()
        record["hashedPassword"] = get_password_hash(record.pop("password"))
        record["role"] = record.get("role") or UserRole.USER.value
        record["name"] = record.get("name") or record["email"]

    def find_by_email(self, email: str) -> Optional[dict]:
        email = (email or "").strip().lower()
        for user in self.list():
            if isinstance(user, dict) and user.get("email") == email:
                return user
        return None


def create_user(
    service: UserService,
    email: str,
    password: str,
    name: Optional[str] = None,
    role: str = UserRole.USER.value,
) -> dict:
    """
    Create a new user

    Args:
        service: User service bound to a store
        email: User email
        password: Plain text password (will be hashed)
        name: Display name (defaults to the email)
        role: User role (default: user)

    Returns:
        Created user record without the password hash
    """
    user = service.create({"email": email, "password": password, "name": name, "role": role})
    return public_user(user)


def authenticate_user(service: UserService, email: str, password: str) -> Optional[dict]:
    """
    Authenticate user with email and password

    Returns:
        User record if authentication successful, None otherwise
    """
    user = service.find_by_email(email)
    if not user or not verify_password(password, user.get("hashedPassword", "")):
        logger.info(f"[AUTH] Failed login for {email}")
        return None
    return user
