import logging
from datetime import date, timedelta

import pytest

from app.core.config import Settings
from app.core.errors import RecordNotFoundError, RecordValidationError
from app.core.ids import utc_now
from app.services.email_service import SmtpEmailSender
from app.services.reminder_service import render_late_payment_email, send_payment_reminder

TODAY = date(2026, 3, 15)


def reminder_data(**tenant):
    return {
        "customers": [{"id": "c1", "name": "Ali", "email": "ali@example.com", **tenant}],
        "properties": [{"id": "p1", "name": "Villa A"}],
        "rentals": [
            {"id": "r1", "tenantId": "c1", "propertyId": "p1", "monthlyRent": 450, "paidUntil": "2026-03-05"},
            {"id": "r2", "tenantId": "c1", "propertyId": "gone", "monthlyRent": 450, "paidUntil": "2026-03-05"},
        ],
    }


def test_render_email_bodies():
    html, text = render_late_payment_email("Ali <b>", "Villa A", 450, 10, "05 March 2026")

    assert "Ali &lt;b&gt;" in html
    assert "OMR 450.000" in html
    assert "Days Overdue: 10 days" in text
    assert text.startswith("Dear Ali <b>,")


def test_send_reminder(email_sender):
    outcome = send_payment_reminder(reminder_data(), "r1", email_sender, TODAY)

    assert outcome.email == "ali@example.com"
    assert outcome.result.success
    [message] = email_sender.sent
    assert message["subject"] == "Payment Reminder - Villa A"
    assert "05 March 2026" in message["text"]
    assert "Days Overdue: 10 days" in message["text"]


@pytest.mark.parametrize("rental_id, error, message", [
    (None, RecordValidationError, "Rental ID is required"),
    ("missing", RecordNotFoundError, "Rental not found"),
    ("r2", RecordNotFoundError, "Property not found"),
])
def test_reminder_errors(email_sender, rental_id, error, message):
    with pytest.raises(error) as excinfo:
        send_payment_reminder(reminder_data(), rental_id, email_sender, TODAY)
    assert str(excinfo.value) == message
    assert email_sender.sent == []


def test_tenant_without_email(email_sender):
    with pytest.raises(RecordValidationError, match="Tenant has no email address"):
        send_payment_reminder(reminder_data(email=""), "r1", email_sender, TODAY)


def test_unconfigured_smtp_reports_failure():
    sender = SmtpEmailSender(Settings(SMTP_SERVER="", SMTP_USER="", SMTP_PASSWORD=""))

    outcome = send_payment_reminder(reminder_data(), "r1", sender, TODAY)

    assert outcome.result.success is False
    assert outcome.result.error == "Email service not configured"


def test_reminder_endpoint(client, auth_headers, email_sender, customer, villa):
    rental = client.post(
        "/api/rentals",
        json={
            "tenantId": customer["id"],
            "propertyId": villa["id"],
            "monthlyRent": 450,
            "paidUntil": (utc_now().date() - timedelta(days=3)).isoformat(),
        },
        headers=auth_headers,
    ).json()

    response = client.post(
        "/api/send-payment-reminder", json={"rentalId": rental["id"]}, headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Payment reminder sent to ali@example.com"
    assert response.json()["emailId"] == "<msg-1@test>"
    assert email_sender.sent[0]["to"] == "ali@example.com"


def test_reminder_endpoint_errors(client, auth_headers, email_sender):
    missing_id = client.post("/api/send-payment-reminder", json={}, headers=auth_headers)
    assert missing_id.status_code == 400
    assert missing_id.json()["detail"] == "Rental ID is required"

    unknown = client.post("/api/send-payment-reminder", json={"rentalId": "nope"}, headers=auth_headers)
    assert unknown.status_code == 404

    assert email_sender.sent == []


def test_reminder_is_logged(email_sender, caplog):
    with caplog.at_level(logging.INFO, logger="app.services.reminder_service"):
        send_payment_reminder(reminder_data(), "r1", email_sender, TODAY)

    assert "[REMINDERS] Reminder for rental r1 sent to ali@example.com" in caplog.messages
