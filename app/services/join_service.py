"""
Join Service - attaches referenced records to receipts and transactions.

Joins are best-effort: a reference that does not resolve (empty, or pointing
at a deleted record) simply leaves the joined field out.
"""
import logging
from typing import Dict, List, Optional

from app.database import Database, JsonStore

logger = logging.getLogger(__name__)

# reference field -> (joined field, collection)
RECEIPT_REFERENCES = {
    "customerId": ("customer", "customers"),
    "propertyId": ("property", "properties"),
}
TRANSACTION_REFERENCES = {
    **RECEIPT_REFERENCES,
    "projectId": ("project", "projects"),
}


class JoinService:
    """Resolves by-id references using per-collection indexes."""

    def __init__(self, data: Database):
        self.data = data
        self._indexes: Dict[str, Dict[str, dict]] = {}

    def lookup(self, collection: str, record_id) -> Optional[dict]:
        if not record_id:
            return None
        if collection not in self._indexes:
            self._indexes[collection] = JsonStore.index(self.data, collection)
        return self._indexes[collection].get(record_id)

    def attach(self, record: dict, references=RECEIPT_REFERENCES) -> dict:
        joined = dict(record)
        for ref_field, (target_field, collection) in references.items():
            ref_id = record.get(ref_field)
            target = self.lookup(collection, ref_id)
            if target is not None:
                joined[target_field] = target
            elif ref_id:
                logger.debug(
                    f"[JOIN] {ref_field}={ref_id} on {record.get('id')} not found in {collection}"
                )
        return joined


def receipt_with_details(data: Database, receipt: dict) -> dict:
    return JoinService(data).attach(receipt)


def transaction_with_details(data: Database, transaction: dict) -> dict:
    return JoinService(data).attach(transaction, TRANSACTION_REFERENCES)


def receipts_with_details(data: Database) -> List[dict]:
    """All receipts with customer/property attached, newest first."""
    joins = JoinService(data)
    joined = [joins.attach(r) for r in data.get("receipts", []) if isinstance(r, dict)]
    joined.sort(key=lambda r: r.get("createdAt") or "", reverse=True)
    return joined
