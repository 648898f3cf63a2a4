"""Database models and enums for the speed-reading engine."""

from speedread.models.enums import ReaderStatus
from speedread.models.stored_record import StoredRecord

__all__ = [
    "StoredRecord",
    "ReaderStatus",
]
