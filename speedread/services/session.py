"""
Resumable reading sessions.

A session is the (token sequence, cursor, language) triple needed to pick
up reading where it stopped. Sessions and reader preferences are stored as
JSON records in a KeyValueStore.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from speedread.schemas.session import ReaderPreferences, SessionRecord, SessionSummary
from speedread.schemas.token import TokenDTO
from speedread.services.progress import to_percentage
from speedread.services.storage import KeyValueStore
from speedread.services.tokenizer.types import TokenSequence

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session:"
PREFERENCES_KEY = "preferences"


@dataclass(frozen=True)
class RestoredSession:
    """A validated session ready to be loaded into the playback clock."""

    sequence: TokenSequence
    cursor: int
    language: str
    saved_at: Optional[datetime] = None

    @property
    def percentage(self) -> float:
        return to_percentage(self.cursor, len(self.sequence))


def serialize(sequence: TokenSequence, cursor: int, language: str) -> SessionRecord:
    """
    Build a persistable record for a reading position.

    The cursor is clamped into the sequence so a record is always restorable.

    Raises:
        ValueError: If token ids are not unique; such a record could not be restored.
    """
    if len({token.id for token in sequence}) != len(sequence):
        raise ValueError("Token ids must be unique within a session")
    cursor = max(0, min(cursor, len(sequence) - 1)) if sequence else 0
    return SessionRecord(
        language=language,
        cursor=cursor,
        tokens=[TokenDTO.from_token(token) for token in sequence],
    )


def restore(
    record: Union[SessionRecord, Mapping[str, Any], None],
) -> Optional[RestoredSession]:
    """
    Validate a stored record and rebuild the session it describes.

    Args:
        record: A SessionRecord or its JSON-decoded form.

    Returns:
        RestoredSession, or None when there is no usable saved session
        (absent, malformed, or with zero tokens).
    """
    if record is None:
        return None

    if not isinstance(record, SessionRecord):
        try:
            record = SessionRecord.model_validate(record)
        except ValidationError as exc:
            logger.warning("Discarding malformed session record: %s", exc.error_count())
            return None

    if not record.tokens:
        return None

    tokens = tuple(dto.to_token() for dto in record.tokens)
    if len({token.id for token in tokens}) != len(tokens):
        logger.warning("Discarding session record with duplicate token ids")
        return None

    sequence = TokenSequence(tokens=tokens, language=record.language)
    cursor = min(record.cursor, len(sequence) - 1)
    return RestoredSession(
        sequence=sequence,
        cursor=cursor,
        language=record.language,
        saved_at=record.saved_at,
    )


class SessionStore:
    """Save and restore sessions and preferences through a KeyValueStore."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    @staticmethod
    def session_key(key: str) -> str:
        return f"{SESSION_KEY_PREFIX}{key}"

    def save(self, key: str, sequence: TokenSequence, cursor: int, language: str) -> SessionRecord:
        record = serialize(sequence, cursor, language)
        self.store.set(self.session_key(key), record.model_dump(mode="json"))
        logger.info("Saved session %s at token %d of %d", key, record.cursor, len(sequence))
        return record

    def load(self, key: str) -> Optional[RestoredSession]:
        return restore(self.store.get(self.session_key(key)))

    def delete(self, key: str) -> bool:
        return self.store.delete(self.session_key(key))

    def list_sessions(self) -> list[SessionSummary]:
        summaries = []
        for stored_key in self.store.keys(SESSION_KEY_PREFIX):
            raw = self.store.get(stored_key)
            try:
                record = SessionRecord.model_validate(raw)
            except ValidationError:
                logger.warning("Skipping malformed session record %s", stored_key)
                continue
            summaries.append(
                SessionSummary(
                    key=stored_key[len(SESSION_KEY_PREFIX):],
                    language=record.language,
                    cursor=record.cursor,
                    total_tokens=len(record.tokens),
                    percentage=to_percentage(record.cursor, len(record.tokens)),
                    saved_at=record.saved_at,
                )
            )
        return summaries

    def save_preferences(self, preferences: ReaderPreferences) -> None:
        self.store.set(PREFERENCES_KEY, preferences.model_dump(mode="json"))

    def load_preferences(self) -> ReaderPreferences:
        """Return stored preferences, falling back to defaults when absent or invalid."""
        raw = self.store.get(PREFERENCES_KEY)
        if raw is None:
            return ReaderPreferences()
        try:
            return ReaderPreferences.model_validate(raw)
        except ValidationError:
            logger.warning("Stored preferences are invalid; using defaults")
            return ReaderPreferences()
