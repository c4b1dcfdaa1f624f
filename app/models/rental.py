from enum import Enum


class RentalPaymentState(str, Enum):
    """Payment state of a rental, derived from its paidUntil date"""
    PAID = "paid"
    OVERDUE = "overdue"
    UNPAID = "unpaid"
