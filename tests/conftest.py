import pytest
from fastapi.testclient import TestClient

from app.database import JsonStore, get_store
from app.main import app
from app.services.auth_service import UserService, create_user
from app.services.email_service import EmailResult, get_email_sender
from app.services.upload_service import FileStorage, get_file_storage

ADMIN_EMAIL = "admin@telal.om"
ADMIN_PASSWORD = "admin-password"


class RecordingEmailSender:
    """Collects outgoing messages instead of talking to SMTP."""

    def __init__(self):
        self.sent = []
        self.fail_with = None

    def send(self, to, subject, html, text="", attachments=()):
        if self.fail_with:
            return EmailResult(success=False, error=self.fail_with)
        self.sent.append({
            "to": to,
            "subject": subject,
            "html": html,
            "text": text,
            "attachments": list(attachments),
        })
        return EmailResult(success=True, id=f"<msg-{len(self.sent)}@test>")


@pytest.fixture
def store(tmp_path):
    return JsonStore(tmp_path / "data" / "db.json")


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(store, email_sender, upload_dir):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    app.dependency_overrides[get_file_storage] = lambda: FileStorage(upload_dir, "/uploads")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(store):
    return create_user(UserService(store), ADMIN_EMAIL, ADMIN_PASSWORD, name="Admin", role="admin")


@pytest.fixture
def auth_headers(client, admin_user):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def customer(client, auth_headers):
    response = client.post(
        "/api/customers",
        json={"name": "Ali", "type": "individual", "phone": "90000000", "email": "ali@example.com"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def villa(client, auth_headers):
    response = client.post(
        "/api/properties",
        json={"name": "Villa A", "type": "villa", "location": "Muscat", "price": 50000, "area": 300},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()
