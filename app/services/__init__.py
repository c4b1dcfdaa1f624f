from app.services.record_service import RecordService
from app.services.property_service import PropertyService
from app.services.customer_service import CustomerService
from app.services.receipt_service import ReceiptService, TransactionService
from app.services.rental_service import RentalService
from app.services.rental_contract_service import RentalContractService
from app.services.document_service import DocumentService
from app.services.auth_service import UserService

__all__ = [
    "RecordService",
    "PropertyService",
    "CustomerService",
    "ReceiptService",
    "TransactionService",
    "RentalService",
    "RentalContractService",
    "DocumentService",
    "UserService",
]
