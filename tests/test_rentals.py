from datetime import date, timedelta

import pytest

from app.core.ids import utc_now
from app.models import RentalPaymentState
from app.services.dashboard_service import days_overdue, overdue_rentals, rental_payment_state

TODAY = date(2026, 3, 15)


def test_create_rental_normalizes(client, auth_headers, customer, villa):
    response = client.post(
        "/api/rentals",
        json={
            "tenantId": customer["id"],
            "propertyId": villa["id"],
            "monthlyRent": "450",
            "paidUntil": "2026-03-31T00:00:00.000Z",
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["monthlyRent"] == 450
    assert response.json()["paidUntil"] == "2026-03-31"


def test_rental_validation(client, auth_headers):
    response = client.post("/api/rentals", json={"paidUntil": "next week"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "Tenant is required",
        "Property is required",
        "Monthly rent must be greater than 0",
        "Paid until must be a valid date (YYYY-MM-DD)",
    ]


def test_paid_until_required(client, auth_headers):
    response = client.post(
        "/api/rentals", json={"tenantId": "c", "propertyId": "p", "monthlyRent": 100}, headers=auth_headers,
    )
    assert response.json()["errors"] == ["Paid until date is required"]


@pytest.mark.parametrize("paid_until, state", [
    ((TODAY - timedelta(days=1)).isoformat(), RentalPaymentState.OVERDUE),
    (TODAY.isoformat(), RentalPaymentState.PAID),
    ((TODAY + timedelta(days=30)).isoformat(), RentalPaymentState.PAID),
    ("", RentalPaymentState.UNPAID),
    ("not a date", RentalPaymentState.UNPAID),
])
def test_payment_state(paid_until, state):
    assert rental_payment_state({"paidUntil": paid_until}, TODAY) == state


def test_days_overdue_never_negative():
    assert days_overdue(TODAY + timedelta(days=3), TODAY) == 0
    assert days_overdue(TODAY - timedelta(days=5), TODAY) == 5


def test_overdue_rentals():
    data = {
        "customers": [{"id": "c1", "name": "Ali", "email": "ali@example.com"}],
        "properties": [{"id": "p1", "name": "Villa A"}],
        "rentals": [
            {"id": "r1", "tenantId": "c1", "propertyId": "p1", "monthlyRent": 450,
             "paidUntil": (TODAY - timedelta(days=5)).isoformat()},
            {"id": "r2", "tenantId": "c1", "propertyId": "p1", "monthlyRent": 450,
             "paidUntil": (TODAY + timedelta(days=1)).isoformat()},
            {"id": "r3", "tenantId": "gone", "propertyId": "gone", "monthlyRent": 300,
             "paidUntil": "2026-01-01"},
        ],
    }

    overdue = overdue_rentals(data, TODAY)

    assert [r["rentalId"] for r in overdue] == ["r1", "r3"]
    assert overdue[0] == {
        "rentalId": "r1",
        "tenantName": "Ali",
        "tenantEmail": "ali@example.com",
        "propertyName": "Villa A",
        "monthlyRent": 450,
        "paidUntil": "2026-03-10",
        "daysOverdue": 5,
    }
    assert overdue[1]["tenantName"] == "Unknown"
    assert overdue[1]["daysOverdue"] == 73


def test_overdue_endpoint(client, auth_headers, customer, villa):
    late = (utc_now().date() - timedelta(days=5)).isoformat()
    ahead = (utc_now().date() + timedelta(days=1)).isoformat()
    for paid_until in (late, ahead):
        client.post(
            "/api/rentals",
            json={"tenantId": customer["id"], "propertyId": villa["id"], "monthlyRent": 450, "paidUntil": paid_until},
            headers=auth_headers,
        )

    response = client.get("/api/send-payment-reminder", headers=auth_headers)

    assert response.status_code == 200
    [overdue] = response.json()
    assert overdue["paidUntil"] == late
    assert overdue["daysOverdue"] == 5
    assert overdue["tenantName"] == "Ali"
