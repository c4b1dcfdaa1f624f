"""
Payment Reminder Engine

Responsibilities:
  • render_late_payment_email - branded HTML + plain-text body for one overdue rental
  • send_payment_reminder     - resolve rental → tenant → property and dispatch by email

Email goes through the injected sender (SMTP in production). If SMTP is not
configured the sender reports failure instead of raising.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from html import escape
from typing import Optional

from app.core.config import Settings, settings
from app.core.errors import RecordNotFoundError, RecordValidationError
from app.core.ids import parse_date
from app.database import Database
from app.services.dashboard_service import days_overdue
from app.services.email_service import EmailResult
from app.services.join_service import JoinService
from app.services.record_service import as_amount

logger = logging.getLogger(__name__)


TEXT_TEMPLATE = (
    "Dear {name},\n\n"
    "This is a friendly reminder that your rent payment for {property} is overdue.\n\n"
    "Amount Due: {currency} {amount}\n"
    "Due Date: {due_date}\n"
    "Days Overdue: {days} days\n\n"
    "Please make the payment at your earliest convenience to avoid any late fees or penalties.\n"
    "If you have already made the payment, please disregard this email.\n\n"
    "Best regards,\n{company}"
)


@dataclass
class ReminderOutcome:
    email: str
    result: EmailResult


def format_due_date(day: date) -> str:
    """e.g. 05 March 2026"""
    return day.strftime("%d %B %Y")


def render_late_payment_email(
    tenant_name: str,
    property_name: str,
    amount_due: float,
    days: int,
    due_date: str,
    config: Settings = settings,
) -> tuple[str, str]:
    """Return (html, text) bodies for a late payment reminder."""
    amount = f"{float(amount_due):.3f}"
    context = {
        "name": tenant_name,
        "property": property_name,
        "currency": config.CURRENCY,
        "amount": amount,
        "due_date": due_date,
        "days": days,
        "company": config.COMPANY_NAME,
    }
    text = TEXT_TEMPLATE.format(**context)
    safe = {k: escape(str(v)) for k, v in context.items()}
    html = f"""
<!DOCTYPE html>
<html>
<head><meta charset="UTF-8"></head>
<body style="margin:0;padding:0;font-family:'Segoe UI',Tahoma,Geneva,Verdana,sans-serif;background-color:#f5f5f5">
  <table width="100%" cellpadding="0" cellspacing="0" style="max-width:600px;margin:0 auto;background-color:#ffffff">
    <tr>
      <td style="background-color:#605c53;padding:30px;text-align:center">
        <h1 style="color:#cea26e;margin:0;font-size:24px">{safe["company"]}</h1>
        <p style="color:#ffffff;margin:5px 0 0;font-size:14px">Real Estate Management</p>
      </td>
    </tr>
    <tr>
      <td style="padding:40px 30px;color:#333;font-size:16px;line-height:1.6">
        <h2 style="color:#605c53;margin:0 0 20px;font-size:20px">Payment Reminder</h2>
        <p>Dear <strong>{safe["name"]}</strong>,</p>
        <p>This is a friendly reminder that your rent payment for <strong>{safe["property"]}</strong> is overdue.</p>
        <table width="100%" cellpadding="10" cellspacing="0" style="background-color:#f8f8f8;border:1px solid #eee;margin:20px 0">
          <tr><td style="color:#666">Amount Due:</td>
              <td style="text-align:right"><strong style="color:#e74c3c;font-size:18px">{safe["currency"]} {safe["amount"]}</strong></td></tr>
          <tr><td style="color:#666">Due Date:</td>
              <td style="text-align:right"><strong>{safe["due_date"]}</strong></td></tr>
          <tr><td style="color:#666">Days Overdue:</td>
              <td style="text-align:right"><strong style="color:#e74c3c">{safe["days"]} days</strong></td></tr>
        </table>
        <p>Please make the payment at your earliest convenience to avoid any late fees or penalties.</p>
        <p>If you have already made the payment, please disregard this email.</p>
        <p>Best regards,<br><strong>{safe["company"]}</strong></p>
      </td>
    </tr>
    <tr>
      <td style="background-color:#605c53;padding:20px 30px;text-align:center;color:#ffffff;font-size:12px">
        {safe["company"]}<br>{escape(config.COMPANY_ADDRESS)}<br>Tel: {escape(config.COMPANY_PHONE)}
      </td>
    </tr>
  </table>
</body>
</html>"""
    return html, text


def send_payment_reminder(
    data: Database,
    rental_id: Optional[str],
    sender,
    today: date,
    config: Settings = settings,
) -> ReminderOutcome:
    """
    Email a late payment reminder for one rental.

    Raises RecordValidationError when the rental id or tenant email is missing,
    RecordNotFoundError when the rental, tenant or property does not exist.
    """
    if not rental_id:
        raise RecordValidationError(["Rental ID is required"])

    joins = JoinService(data)
    rental = joins.lookup("rentals", rental_id)
    if rental is None:
        raise RecordNotFoundError("Rental", rental_id)

    tenant = joins.lookup("customers", rental.get("tenantId"))
    if tenant is None:
        raise RecordNotFoundError("Tenant", rental.get("tenantId") or "")
    if not tenant.get("email"):
        raise RecordValidationError(["Tenant has no email address"])

    prop = joins.lookup("properties", rental.get("propertyId"))
    if prop is None:
        raise RecordNotFoundError("Property", rental.get("propertyId") or "")

    paid_until = parse_date(rental.get("paidUntil"))
    if paid_until is None:
        raise RecordValidationError(["Rental has no valid paid until date"])

    html, text = render_late_payment_email(
        tenant_name=tenant.get("name") or "Tenant",
        property_name=prop.get("name") or "",
        amount_due=as_amount(rental.get("monthlyRent")),
        days=days_overdue(paid_until, today),
        due_date=format_due_date(paid_until),
        config=config,
    )
    result = sender.send(
        to=tenant["email"],
        subject=f"Payment Reminder - {prop.get('name') or ''}",
        html=html,
        text=text,
    )
    if result.success:
        logger.info(f"[REMINDERS] Reminder for rental {rental_id} sent to {tenant['email']}")
    else:
        logger.warning(f"[REMINDERS] Reminder for rental {rental_id} failed: {result.error}")
    return ReminderOutcome(email=tenant["email"], result=result)
