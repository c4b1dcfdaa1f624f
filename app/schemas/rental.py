"""
Rental Pydantic Schemas - rentals, overdue listing and payment reminders
"""
from typing import Optional, Union

from app.schemas.common import CamelModel, RecordResponse


class RentalBase(CamelModel):
    tenant_id: Optional[str] = None
    property_id: Optional[str] = None
    monthly_rent: Optional[Union[float, str]] = None
    paid_until: Optional[str] = None
    start_date: Optional[str] = None
    notes: Optional[str] = None


class RentalCreate(RentalBase):
    id: Optional[str] = None


class RentalUpdate(RentalBase):
    pass


class RentalResponse(RentalBase, RecordResponse):
    pass


class OverdueRentalResponse(CamelModel):
    rental_id: str
    tenant_name: str
    tenant_email: Optional[str] = None
    property_name: str
    monthly_rent: Optional[float] = None
    paid_until: str
    days_overdue: int


class PaymentReminderRequest(CamelModel):
    rental_id: Optional[str] = None


class PaymentReminderResponse(CamelModel):
    success: bool
    message: str
    email_id: Optional[str] = None
