"""
Key-value persistence for sessions and preferences.

The engine only needs ``get``/``set``/``delete`` on JSON-compatible
records; where they live is up to the embedding application. An in-memory
store and a SQLAlchemy-backed store are provided.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from speedread.models.stored_record import StoredRecord

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class KeyValueStore(Protocol):
    """Minimal persistence interface used by the session tracker."""

    def get(self, key: str) -> Optional[Record]:
        ...

    def set(self, key: str, record: Record) -> None:
        ...

    def delete(self, key: str) -> bool:
        ...

    def keys(self, prefix: str = "") -> List[str]:
        ...


class InMemoryKeyValueStore:
    """Dictionary-backed store. Records are copied through JSON on the way in."""

    def __init__(self) -> None:
        self._records: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Record]:
        raw = self._records.get(key)
        return None if raw is None else json.loads(raw)

    def set(self, key: str, record: Record) -> None:
        self._records[key] = json.dumps(record)

    def delete(self, key: str) -> bool:
        return self._records.pop(key, None) is not None

    def keys(self, prefix: str = "") -> List[str]:
        return sorted(key for key in self._records if key.startswith(prefix))


class SqlKeyValueStore:
    """Store records as JSON text in the ``stored_records`` table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, key: str) -> Optional[Record]:
        row = self.db.get(StoredRecord, key)
        if row is None:
            return None
        try:
            return json.loads(row.value)
        except json.JSONDecodeError:
            logger.warning("Stored record %s is not valid JSON; ignoring it", key)
            return None

    def set(self, key: str, record: Record) -> None:
        payload = json.dumps(record, default=str)
        row = self.db.get(StoredRecord, key)
        if row is None:
            self.db.add(StoredRecord(key=key, value=payload))
        else:
            row.value = payload
        self.db.commit()

    def delete(self, key: str) -> bool:
        row = self.db.get(StoredRecord, key)
        if row is None:
            return False
        self.db.delete(row)
        self.db.commit()
        return True

    def keys(self, prefix: str = "") -> List[str]:
        stmt = select(StoredRecord.key).order_by(StoredRecord.key)
        if prefix:
            stmt = stmt.where(StoredRecord.key.startswith(prefix, autoescape=True))
        return list(self.db.scalars(stmt))
