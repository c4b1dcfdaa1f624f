"""
Record Errors
The three failure kinds of the data-access layer. Validation and not-found
errors are answered to the caller; storage errors are fatal for the request.
"""
from typing import Iterable, List


class RecordError(Exception):
    """Base class for all data-access errors."""

    status_code = 500

    @property
    def messages(self) -> List[str]:
        return [str(self)]


class RecordValidationError(RecordError):
    """One or more field violations, reported together."""

    status_code = 400

    def __init__(self, messages: Iterable[str]):
        self._messages = list(messages)
        super().__init__(", ".join(self._messages))

    @property
    def messages(self) -> List[str]:
        return list(self._messages)


class RecordNotFoundError(RecordError):
    """The targeted id is absent from its collection."""

    status_code = 404

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found")


class StorageError(RecordError):
    """Reading or writing the backing document failed."""

    status_code = 500
