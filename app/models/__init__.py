"""
Domain models
Records are plain JSON objects; these modules hold the collection names and
the enumerated values the records use.
"""
from app.models.user import UserRole
from app.models.property import PropertyStatus
from app.models.customer import CustomerType
from app.models.receipt import ReceiptType, PaymentMethod
from app.models.rental_contract import ContractStatus
from app.models.document import DocumentCategory
from app.models.rental import RentalPaymentState

# Top-level keys of the database document, in file order
COLLECTIONS = (
    "users",
    "projects",
    "properties",
    "customers",
    "rentals",
    "receipts",
    "contracts",
    "documents",
    "rentalContracts",
    "transactions",
)

__all__ = [
    "COLLECTIONS",
    "UserRole",
    "PropertyStatus",
    "CustomerType",
    "ReceiptType",
    "PaymentMethod",
    "ContractStatus",
    "DocumentCategory",
    "RentalPaymentState",
]
