"""
Identifier and timestamp helpers shared by the record services.
"""
import random
import secrets
import time
from datetime import date, datetime, timezone
from typing import Optional


class IdGenerator:
    """Builds `<prefix>-<epoch ms>-<hex>` ids: unique, sortable by creation time."""

    def new_id(self, prefix: str) -> str:
        millis = int(time.time() * 1000)
        return f"{prefix}-{millis}-{secrets.token_hex(4)}"


default_id_generator = IdGenerator()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision and a `Z` suffix."""
    moment = moment or utc_now()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso(today: Optional[date] = None) -> str:
    return (today or utc_now().date()).isoformat()


def parse_date(value) -> Optional[date]:
    """Parse `YYYY-MM-DD` (or a full ISO timestamp) into a date; None if invalid."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def generate_contract_number(today: Optional[date] = None) -> str:
    """`RC-YYYYMMDD-###` with a random suffix; uniqueness is not checked."""
    day = today or utc_now().date()
    return f"RC-{day.strftime('%Y%m%d')}-{random.randint(0, 999):03d}"
