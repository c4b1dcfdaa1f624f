"""
Transaction Routes
Receipts addressed as transactions; the read view also joins the project.
"""
from fastapi import APIRouter, Depends

from app.database import JsonStore, get_store
from app.dependencies import require_role
from app.models import UserRole
from app.schemas.common import SuccessResponse
from app.schemas.receipt import ReceiptResponse, ReceiptUpdate, TransactionDetailResponse
from app.services.join_service import transaction_with_details
from app.services.receipt_service import TransactionService

router = APIRouter()


def get_transaction_service(store: JsonStore = Depends(get_store)) -> TransactionService:
    return TransactionService(store)


@router.get("/{transaction_id}", response_model=TransactionDetailResponse, response_model_exclude_unset=True)
def get_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    """Get single transaction with customer, property and project"""
    data, transaction = service.fetch(transaction_id)
    return transaction_with_details(data, transaction)


@router.put("/{transaction_id}", response_model=ReceiptResponse, response_model_exclude_unset=True)
def update_transaction(
    transaction_id: str,
    transaction_update: ReceiptUpdate,
    service: TransactionService = Depends(get_transaction_service),
):
    return service.update(transaction_id, transaction_update.to_record())


@router.delete("/{transaction_id}", response_model=SuccessResponse)
def delete_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
    current_user: dict = Depends(require_role(UserRole.MANAGER)),
):
    service.delete(transaction_id)
    return SuccessResponse()
