"""
Receipt Service - receipts and the transaction view over the same collection.

Receipt numbers are `TPL-####`: one more than the highest number already
issued. Two concurrent creates can read the same maximum and issue the same
number; the store has no lock to prevent that.
"""
import re
from typing import Iterable

from app.core.ids import today_iso
from app.services.record_service import (
    RecordService, require_positive, require_text, require_value,
)

RECEIPT_PREFIX = "TPL-"
RECEIPT_NO_PATTERN = re.compile(r"TPL-(\d+)")

# Optional references that are dropped when empty
_REFERENCE_FIELDS = ("customerId", "propertyId", "rentalId", "projectId")


def receipt_number_value(receipt_no) -> int:
    """Numeric suffix of a receipt number, 0 when it does not match."""
    if not isinstance(receipt_no, str):
        return 0
    match = RECEIPT_NO_PATTERN.search(receipt_no)
    return int(match.group(1)) if match else 0


def generate_receipt_number(receipts: Iterable[dict]) -> str:
    highest = max(
        (receipt_number_value(r.get("receiptNo")) for r in receipts if isinstance(r, dict)),
        default=0,
    )
    return f"{RECEIPT_PREFIX}{highest + 1:04d}"


class ReceiptService(RecordService):
    collection = "receipts"
    entity = "Receipt"
    id_prefix = "rcpt"
    immutable_fields = ("id", "receiptNo")
    positive_fields = {"amount": "Amount must be greater than 0"}

    def validate(self, draft):
        errors = []
        require_value(draft, "type", "Receipt type is required", errors)
        require_positive(draft, "amount", self.positive_fields["amount"], errors)
        require_text(draft, "paidBy", "Paid by is required", errors)
        require_value(draft, "paymentMethod", "Payment method is required", errors)
        return errors

    def apply_defaults(self, record, data, now):
        record["receiptNo"] = generate_receipt_number(data[self.collection])
        record["paidBy"] = record["paidBy"].strip()
        for field in _REFERENCE_FIELDS:
            if field in record and not record[field]:
                del record[field]
        record["description"] = record.get("description") or ""
        record["date"] = record.get("date") or today_iso(now.date())


class TransactionService(ReceiptService):
    """Transactions are receipts addressed through /api/transactions."""

    entity = "Transaction"
