"""
Receipt enums
Receipt numbers follow the `TPL-####` format.
"""
from enum import Enum


class ReceiptType(str, Enum):
    """Receipt type enum"""
    RENT = "rent"
    DEPOSIT = "deposit"
    MAINTENANCE = "maintenance"
    OTHER = "other"


class PaymentMethod(str, Enum):
    """Payment method enum"""
    CASH = "cash"
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    CHEQUE = "cheque"
