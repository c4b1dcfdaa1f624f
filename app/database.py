"""
JSON document store.
The whole database lives in one JSON file: every request loads it, mutates
one collection in memory and writes the full document back. There is no lock
between load and save, so concurrent writers race and the last one wins.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from app.core.config import settings
from app.core.errors import StorageError
from app.models import COLLECTIONS

logger = logging.getLogger(__name__)

Database = Dict[str, List[dict]]


def empty_database() -> Database:
    return {name: [] for name in COLLECTIONS}


class JsonStore:
    """Loads and saves the database document as a unit."""

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> Database:
        """Return a fresh copy of the database, creating the file on first run."""
        if not self.path.exists():
            data = empty_database()
            self.save(data)
            logger.info(f"[STORE] Initialized empty database at {self.path}")
            return data

        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"[STORE] Error reading database {self.path}: {e}")
            raise StorageError(f"Failed to read database: {e}") from e

        if not isinstance(raw, dict):
            logger.error(f"[STORE] Database {self.path} is not a JSON object")
            raise StorageError("Database document must be a JSON object")

        for name in COLLECTIONS:
            if not isinstance(raw.get(name), list):
                raw[name] = []
        return raw

    def save(self, data: Database) -> None:
        """Overwrite the whole document."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"[STORE] Error writing database {self.path}: {e}")
            raise StorageError(f"Failed to write database: {e}") from e

    @staticmethod
    def index(data: Database, collection: str) -> Dict[str, dict]:
        """Map record id -> record for one collection."""
        return {
            record["id"]: record
            for record in data.get(collection, [])
            if isinstance(record, dict) and record.get("id")
        }


def get_store() -> JsonStore:
    """Dependency for getting the document store."""
    return JsonStore(settings.DATABASE_PATH)


def test_connection(store: Optional[JsonStore] = None) -> bool:
    """Check that the database file can be read - NON-BLOCKING."""
    store = store or get_store()
    try:
        store.load()
        return True
    except StorageError as e:
        logger.warning(f"[STORE] Database check failed (continuing): {e}")
        return False


def init_db(store: Optional[JsonStore] = None) -> bool:
    """Create the database file with empty collections if missing."""
    store = store or get_store()
    try:
        data = store.load()
        store.save(data)
        logger.info(f"[STORE] Database ready: {store.path}")
        return True
    except StorageError as e:
        logger.warning(f"[STORE] Database init warning: {e}")
        return False
