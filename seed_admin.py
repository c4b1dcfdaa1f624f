"""
Create the first admin account, or reset its password.

    ADMIN_EMAIL=admin@telal.om ADMIN_PASSWORD=... python seed_admin.py
"""
import os
import sys

from app.core.security import get_password_hash
from app.database import get_store
from app.models import UserRole
from app.services.auth_service import UserService, create_user


def main() -> int:
    email = os.getenv("ADMIN_EMAIL", "").strip().lower()
    password = os.getenv("ADMIN_PASSWORD", "")
    if not email or not password:
        print("[ERROR] ADMIN_EMAIL and ADMIN_PASSWORD must be set")
        return 1

    service = UserService(get_store())
    existing = service.find_by_email(email)
    if existing is None:
        user = create_user(service, email, password, name="Administrator", role=UserRole.ADMIN.value)
        print(f"[OK] Created admin {user['email']} ({user['id']})")
    else:
        service.update(existing["id"], {
            "hashedPassword": get_password_hash(password),
            "role": UserRole.ADMIN.value,
        })
        print(f"[OK] Reset password for {email}")

    users = service.list()
    print(f"Found {len(users)} user(s):")
    for u in users:
        print(f" - ID: {u['id']} | Email: {u['email']} | Role: {u.get('role')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
