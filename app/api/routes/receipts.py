"""
Receipt Routes
Receipt CRUD, joined read views, PDF download and emailing the PDF
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.database import JsonStore, get_store
from app.dependencies import require_role
from app.models import UserRole
from app.schemas.common import SuccessResponse
from app.schemas.receipt import (
    ReceiptCreate, ReceiptDetailResponse, ReceiptEmailResponse,
    ReceiptResponse, ReceiptUpdate,
)
from app.services.email_service import get_email_sender
from app.services.join_service import receipt_with_details, receipts_with_details
from app.services.pdf_service import generate_receipt_pdf, receipt_filename
from app.services.receipt_service import ReceiptService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_receipt_service(store: JsonStore = Depends(get_store)) -> ReceiptService:
    return ReceiptService(store)


def _joined_receipt(service: ReceiptService, receipt_id: str) -> dict:
    data, receipt = service.fetch(receipt_id)
    return receipt_with_details(data, receipt)


@router.get("", response_model=List[ReceiptDetailResponse], response_model_exclude_unset=True)
def list_receipts(store: JsonStore = Depends(get_store)):
    """Get all receipts with customer and property data, newest first"""
    return receipts_with_details(store.load())


@router.post(
    "",
    response_model=ReceiptResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_receipt(
    receipt_in: ReceiptCreate,
    service: ReceiptService = Depends(get_receipt_service),
):
    """Create a new receipt with the next TPL-#### number"""
    return service.create(receipt_in.to_record())


@router.get("/{receipt_id}", response_model=ReceiptDetailResponse, response_model_exclude_unset=True)
def get_receipt(receipt_id: str, service: ReceiptService = Depends(get_receipt_service)):
    """Get a single receipt with customer and property attached"""
    return _joined_receipt(service, receipt_id)


@router.put("/{receipt_id}", response_model=ReceiptResponse, response_model_exclude_unset=True)
def update_receipt(
    receipt_id: str,
    receipt_update: ReceiptUpdate,
    service: ReceiptService = Depends(get_receipt_service),
):
    """Update a receipt (id and receipt number are preserved)"""
    return service.update(receipt_id, receipt_update.to_record())


@router.delete("/{receipt_id}", response_model=SuccessResponse)
def delete_receipt(
    receipt_id: str,
    service: ReceiptService = Depends(get_receipt_service),
    current_user: dict = Depends(require_role(UserRole.MANAGER)),
):
    """Delete a receipt"""
    service.delete(receipt_id)
    return SuccessResponse()


@router.get("/{receipt_id}/pdf")
def download_receipt_pdf(receipt_id: str, service: ReceiptService = Depends(get_receipt_service)):
    """Download a receipt as PDF"""
    receipt = _joined_receipt(service, receipt_id)
    pdf = generate_receipt_pdf(receipt)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{receipt_filename(receipt)}"'},
    )


@router.post("/{receipt_id}/email", response_model=ReceiptEmailResponse)
def email_receipt(
    receipt_id: str,
    service: ReceiptService = Depends(get_receipt_service),
    sender=Depends(get_email_sender),
):
    """Email the receipt PDF to the receipt's customer"""
    receipt = _joined_receipt(service, receipt_id)
    email = (receipt.get("customer") or {}).get("email")
    if not email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Customer has no email address",
        )

    receipt_no = receipt.get("receiptNo") or receipt_id
    result = sender.send(
        to=email,
        subject=f"Payment Receipt {receipt_no}",
        html=f"<p>Dear {receipt.get('paidBy') or 'Customer'},</p>"
             f"<p>Please find attached your payment receipt <strong>{receipt_no}</strong>.</p>",
        text=f"Please find attached your payment receipt {receipt_no}.",
        attachments=[(receipt_filename(receipt), generate_receipt_pdf(receipt), "pdf")],
    )
    if not result.success:
        logger.error(f"[RECEIPTS] Emailing {receipt_no} failed: {result.error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=result.error or "Failed to send email",
        )
    return ReceiptEmailResponse(success=True, message=f"Receipt sent to {email}", email_id=result.id)
