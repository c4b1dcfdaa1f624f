"""
Record Service - shared create/read/update/delete over one collection.

Every operation loads the whole document, works on one collection and saves
the whole document back. Validation runs before anything is touched, so a
rejected draft never causes a write.
"""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from app.core.errors import RecordNotFoundError, RecordValidationError
from app.core.ids import IdGenerator, default_id_generator, iso_timestamp, utc_now
from app.database import Database, JsonStore

logger = logging.getLogger(__name__)


# ── Validation helpers ──────────────────────────────────────────────────────

def is_blank(value: Any) -> bool:
    """True for missing values and strings with no visible characters."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def as_positive_number(value: Any) -> Optional[float]:
    """Return value as a float if it is a number (or numeric string) > 0."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number or number <= 0:  # NaN or non-positive
        return None
    return number


def as_amount(value: Any) -> float:
    """Stored money value as a float, 0 when it is missing or not numeric."""
    if isinstance(value, bool):
        return 0.0
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def require_text(draft: dict, field: str, message: str, errors: List[str]) -> None:
    if is_blank(draft.get(field)):
        errors.append(message)


def require_value(draft: dict, field: str, message: str, errors: List[str]) -> None:
    if not draft.get(field):
        errors.append(message)


def require_positive(draft: dict, field: str, message: str, errors: List[str]) -> None:
    if as_positive_number(draft.get(field)) is None:
        errors.append(message)


# ── Base service ────────────────────────────────────────────────────────────

class RecordService:
    """CRUD over one collection of the JSON store."""

    collection: str = ""
    entity: str = "Record"
    id_prefix: str = "rec"
    # Fields a patch can never overwrite
    immutable_fields: Tuple[str, ...] = ("id",)
    # Numeric fields that must stay > 0: field -> message
    positive_fields: Dict[str, str] = {}

    def __init__(
        self,
        store: JsonStore,
        id_generator: IdGenerator = default_id_generator,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.ids = id_generator
        self.clock = clock

    # Hooks for entity services

    def validate(self, draft: dict) -> List[str]:
        """Return every violated rule of a draft (empty when valid)."""
        return []

    def apply_defaults(self, record: dict, data: Database, now: datetime) -> None:
        """Fill declared defaults and derived fields on a new record."""

    # Operations

    def list(self) -> List[dict]:
        return list(self.store.load()[self.collection])

    def get(self, record_id: str) -> dict:
        return self.fetch(record_id)[1]

    def fetch(self, record_id: str) -> Tuple[Database, dict]:
        """Load the document and return it with the record, for joined views."""
        data = self.store.load()
        _, record = self._find(data, record_id)
        return data, record

    def create(self, draft: Dict[str, Any]) -> dict:
        data = self.store.load()
        errors = self.validate(draft)
        if draft.get("id") and self._exists(data, draft["id"]):
            errors.append(f"{self.entity} with this ID already exists")
        if errors:
            logger.info(f"[{self.collection.upper()}] Rejected draft: {errors}")
            raise RecordValidationError(errors)

        now = self.clock()
        stamp = iso_timestamp(now)

        record = dict(draft)
        if not record.get("id"):
            record["id"] = self.ids.new_id(self.id_prefix)
        record["createdAt"] = record.get("createdAt") or stamp
        record["updatedAt"] = record.get("updatedAt") or stamp
        self._coerce_numbers(record)
        self.apply_defaults(record, data, now)

        data[self.collection].append(record)
        self.store.save(data)
        logger.info(f"[{self.collection.upper()}] Created {self.entity} {record['id']}")
        return record

    def update(self, record_id: str, patch: Dict[str, Any]) -> dict:
        data = self.store.load()
        index, existing = self._find(data, record_id)

        errors = [
            message for field, message in self.positive_fields.items()
            if field in patch and as_positive_number(patch[field]) is None
        ]
        if errors:
            logger.info(f"[{self.collection.upper()}] Rejected patch for {record_id}: {errors}")
            raise RecordValidationError(errors)
        patch = dict(patch)
        self._coerce_numbers(patch)

        merged = dict(existing)
        for key, value in patch.items():
            if key in self.immutable_fields:
                continue
            merged[key] = value
        merged["updatedAt"] = iso_timestamp(self.clock())

        data[self.collection][index] = merged
        self.store.save(data)
        logger.info(f"[{self.collection.upper()}] Updated {self.entity} {record_id}")
        return merged

    def delete(self, record_id: str) -> None:
        data = self.store.load()
        index, _ = self._find(data, record_id)
        del data[self.collection][index]
        self.store.save(data)
        logger.info(f"[{self.collection.upper()}] Deleted {self.entity} {record_id}")

    def _coerce_numbers(self, record: dict) -> None:
        for field in self.positive_fields:
            if field in record:
                record[field] = as_positive_number(record[field])

    def _exists(self, data: Database, record_id: str) -> bool:
        return any(
            isinstance(record, dict) and record.get("id") == record_id
            for record in data[self.collection]
        )

    def _find(self, data: Database, record_id: str) -> Tuple[int, dict]:
        for index, record in enumerate(data[self.collection]):
            if isinstance(record, dict) and record.get("id") == record_id:
                return index, record
        raise RecordNotFoundError(self.entity, record_id)
