import pytest

from app.core.errors import RecordValidationError
from app.core.security import create_access_token, decode_access_token
from app.services.auth_service import UserService, authenticate_user, create_user

ADMIN_EMAIL = "admin@telal.om"
ADMIN_PASSWORD = "admin-password"


def test_login_returns_token(client, admin_user):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "admin"
    assert decode_access_token(body["access_token"])["sub"] == ADMIN_EMAIL


def test_login_invalid(client, admin_user):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong"})
    assert response.status_code == 401

    unknown = client.post("/api/auth/login", json={"email": "nobody@telal.om", "password": "x"})
    assert unknown.status_code == 401


def test_me_hides_password_hash(client, auth_headers):
    response = client.get("/api/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["email"] == ADMIN_EMAIL
    assert "hashedPassword" not in response.json()


def test_invalid_and_orphaned_tokens(client, admin_user):
    garbage = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert garbage.status_code == 401

    orphan = create_access_token({"sub": "deleted@telal.om"})
    response = client.get("/api/properties", headers={"Authorization": f"Bearer {orphan}"})
    assert response.status_code == 401


def test_create_user_hashes_password(store):
    service = UserService(store)
    user = create_user(service, "  Manager@Telal.om ", "secret", role="manager")

    assert user["email"] == "manager@telal.om"
    assert "hashedPassword" not in user
    stored = service.find_by_email("manager@telal.om")
    assert stored["hashedPassword"] != "secret"
    assert "password" not in stored
    assert authenticate_user(service, "manager@telal.om", "secret")["id"] == user["id"]
    assert authenticate_user(service, "manager@telal.om", "nope") is None


def test_duplicate_email_and_bad_role(store):
    service = UserService(store)
    create_user(service, "clerk@telal.om", "secret")

    with pytest.raises(RecordValidationError) as excinfo:
        service.create({"email": "CLERK@telal.om", "password": "x", "role": "owner"})

    assert "Email already registered" in excinfo.value.messages
    assert excinfo.value.messages[0].startswith("Role must be one of:")
