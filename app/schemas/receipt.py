"""
Receipt Pydantic Schemas - API Request/Response Models
"""
from typing import Optional, Union

from app.schemas.common import CamelModel, RecordResponse
from app.schemas.customer import CustomerResponse
from app.schemas.property import PropertyResponse


class ReceiptBase(CamelModel):
    type: Optional[str] = None
    # numeric strings are accepted, as the forms post them
    amount: Optional[Union[float, str]] = None
    paid_by: Optional[str] = None
    payment_method: Optional[str] = None
    customer_id: Optional[str] = None
    property_id: Optional[str] = None
    rental_id: Optional[str] = None
    project_id: Optional[str] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None


class ReceiptCreate(ReceiptBase):
    id: Optional[str] = None


class ReceiptUpdate(ReceiptBase):
    pass


class ReceiptResponse(ReceiptBase, RecordResponse):
    receipt_no: Optional[str] = None


class ReceiptDetailResponse(ReceiptResponse):
    customer: Optional[CustomerResponse] = None
    property: Optional[PropertyResponse] = None


class TransactionDetailResponse(ReceiptDetailResponse):
    project: Optional[dict] = None


class ReceiptEmailResponse(CamelModel):
    success: bool
    message: str
    email_id: Optional[str] = None
