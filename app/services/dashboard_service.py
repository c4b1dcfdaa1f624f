"""
Dashboard Service - overdue rentals and dashboard summaries.

All figures are computed by scanning the collections of one loaded document.
Revenue is the sum of receipt amounts dated inside the period window; expenses
come from `transactions` records of type "expense". Change percentages compare
against the window of the same length immediately before.
"""
import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from app.core.errors import RecordValidationError
from app.core.ids import parse_date
from app.database import Database
from app.models import PropertyStatus, RentalPaymentState
from app.services.join_service import JoinService
from app.services.record_service import as_amount

logger = logging.getLogger(__name__)

PERIODS = ("this_week", "this_month", "this_year", "all")

Window = Optional[Tuple[date, date]]


# ── Overdue rentals ─────────────────────────────────────────────────────────

def days_overdue(paid_until: date, today: date) -> int:
    return max(0, (today - paid_until).days)


def rental_payment_state(rental: dict, today: date) -> RentalPaymentState:
    paid_until = parse_date(rental.get("paidUntil"))
    if paid_until is None:
        return RentalPaymentState.UNPAID
    if paid_until < today:
        return RentalPaymentState.OVERDUE
    return RentalPaymentState.PAID


def is_overdue(rental: dict, today: date) -> bool:
    return rental_payment_state(rental, today) == RentalPaymentState.OVERDUE


def overdue_rentals(data: Database, today: date) -> List[dict]:
    """Rentals whose paidUntil is strictly before today, with tenant/property names."""
    joins = JoinService(data)
    overdue = []
    for rental in data.get("rentals", []):
        if not isinstance(rental, dict) or not is_overdue(rental, today):
            continue
        tenant = joins.lookup("customers", rental.get("tenantId")) or {}
        prop = joins.lookup("properties", rental.get("propertyId")) or {}
        overdue.append({
            "rentalId": rental.get("id"),
            "tenantName": tenant.get("name") or "Unknown",
            "tenantEmail": tenant.get("email") or None,
            "propertyName": prop.get("name") or "Unknown",
            "monthlyRent": rental.get("monthlyRent"),
            "paidUntil": rental.get("paidUntil"),
            "daysOverdue": days_overdue(parse_date(rental["paidUntil"]), today),
        })
    return overdue


# ── Period windows ──────────────────────────────────────────────────────────

def period_window(period: str, today: date) -> Window:
    """Inclusive (start, end) dates of the current period, None for `all`."""
    if period == "this_week":
        return today - timedelta(days=today.weekday()), today
    if period == "this_month":
        return today.replace(day=1), today
    if period == "this_year":
        return today.replace(month=1, day=1), today
    if period == "all":
        return None
    raise RecordValidationError([f"Period must be one of: {', '.join(PERIODS)}"])


def previous_window(period: str, today: date) -> Window:
    """The full period immediately before the current one."""
    if period == "this_week":
        start = today - timedelta(days=today.weekday() + 7)
        return start, start + timedelta(days=6)
    if period == "this_month":
        end = today.replace(day=1) - timedelta(days=1)
        return end.replace(day=1), end
    if period == "this_year":
        return date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)
    return None


def _in_window(record: dict, window: Window) -> bool:
    if window is None:
        return True
    day = parse_date(record.get("date")) or parse_date(record.get("createdAt"))
    return day is not None and window[0] <= day <= window[1]


def _totals(data: Database, window: Window) -> Tuple[float, float]:
    revenue = sum(
        as_amount(r.get("amount")) for r in data.get("receipts", [])
        if isinstance(r, dict) and _in_window(r, window)
    )
    expenses = sum(
        as_amount(t.get("amount")) for t in data.get("transactions", [])
        if isinstance(t, dict) and t.get("type") == "expense" and _in_window(t, window)
    )
    return revenue, expenses


def percent_change(current: float, previous: float) -> float:
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round((current - previous) / previous * 100, 1)


# ── Summary ─────────────────────────────────────────────────────────────────

def dashboard_summary(data: Database, period: str, today: date) -> Dict:
    window = period_window(period, today)
    revenue, expenses = _totals(data, window)

    if window is None:
        revenue_change = expense_change = 0.0
    else:
        prev_revenue, prev_expenses = _totals(data, previous_window(period, today))
        revenue_change = percent_change(revenue, prev_revenue)
        expense_change = percent_change(expenses, prev_expenses)

    properties = [p for p in data.get("properties", []) if isinstance(p, dict)]
    property_counts = {status.value: 0 for status in PropertyStatus}
    for prop in properties:
        if prop.get("status") in property_counts:
            property_counts[prop["status"]] += 1

    rentals = [r for r in data.get("rentals", []) if isinstance(r, dict)]
    rental_counts = {state.value: 0 for state in RentalPaymentState}
    for rental in rentals:
        rental_counts[rental_payment_state(rental, today).value] += 1

    logger.debug(f"[DASHBOARD] period={period} revenue={revenue} expenses={expenses}")
    return {
        "financial": {
            "revenue": round(revenue, 3),
            "expenses": round(expenses, 3),
            "netIncome": round(revenue - expenses, 3),
            "revenueChange": revenue_change,
            "expenseChange": expense_change,
        },
        "properties": {"total": len(properties), **property_counts},
        "rentals": {"total": len(rentals), **rental_counts},
        "period": period,
    }
