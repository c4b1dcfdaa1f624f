"""
Payment Reminder Routes
List overdue rentals and email a late payment reminder for one of them.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.ids import utc_now
from app.database import JsonStore, get_store
from app.schemas.rental import (
    OverdueRentalResponse, PaymentReminderRequest, PaymentReminderResponse,
)
from app.services.dashboard_service import overdue_rentals
from app.services.email_service import get_email_sender
from app.services.reminder_service import send_payment_reminder

router = APIRouter()


@router.get("", response_model=List[OverdueRentalResponse])
def list_overdue_rentals(store: JsonStore = Depends(get_store)):
    """Get all overdue rentals"""
    return overdue_rentals(store.load(), utc_now().date())


@router.post("", response_model=PaymentReminderResponse)
def send_reminder(
    request: PaymentReminderRequest,
    store: JsonStore = Depends(get_store),
    sender=Depends(get_email_sender),
):
    """Send late payment reminder email"""
    outcome = send_payment_reminder(store.load(), request.rental_id, sender, utc_now().date())
    if not outcome.result.success:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=outcome.result.error or "Failed to send reminder",
        )
    return PaymentReminderResponse(
        success=True,
        message=f"Payment reminder sent to {outcome.email}",
        email_id=outcome.result.id,
    )
