"""Pydantic schemas for persisted reading sessions and preferences."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from speedread.schemas.token import TokenDTO
from speedread.services.tokenizer.constants import TOKENIZER_VERSION

SESSION_RECORD_VERSION = 1


class SessionRecord(BaseModel):
    """Persistable (sequence, cursor, language) triple."""

    version: int = SESSION_RECORD_VERSION
    tokenizer_version: str = TOKENIZER_VERSION
    language: str = Field(..., min_length=1)
    cursor: int = Field(0, ge=0)
    tokens: list[TokenDTO] = Field(default_factory=list)
    saved_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ReaderPreferences(BaseModel):
    """User preferences restored between sessions."""

    words_per_minute: int = Field(300, ge=50, le=2000)
    font_size: int = Field(64, ge=12, le=160)
    pause_on_punctuation: bool = True
    vertical_mode: bool = False
    dyslexic_mode: bool = False
    focus_mode: bool = False


class SessionSummary(BaseModel):
    key: str
    language: str
    cursor: int
    total_tokens: int
    percentage: float
    saved_at: datetime
