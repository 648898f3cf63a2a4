"""Reading session and preference API routes."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.orm import Session

from speedread.database import get_db
from speedread.schemas.session import ReaderPreferences, SessionRecord, SessionSummary
from speedread.schemas.token import TokenDTO
from speedread.services.session import SessionStore
from speedread.services.storage import SqlKeyValueStore
from speedread.services.tokenizer import TokenSequence

router = APIRouter()
logger = logging.getLogger(__name__)


class SaveSessionRequest(BaseModel):
    language: str = Field("en", min_length=1)
    cursor: int = Field(0, ge=0)
    tokens: List[TokenDTO]

    @field_validator("tokens")
    @classmethod
    def check_unique_ids(cls, tokens: List[TokenDTO]) -> List[TokenDTO]:
        seen = set()
        for token in tokens:
            if token.id in seen:
                raise ValueError(f"Duplicate token id: {token.id}")
            seen.add(token.id)
        return tokens


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
    return SessionStore(SqlKeyValueStore(db))


# =============================================================================
# Sessions
# =============================================================================


@router.get("/sessions", response_model=List[SessionSummary])
def list_sessions(store: SessionStore = Depends(get_session_store)):
    """List saved reading sessions."""
    return store.list_sessions()


@router.put("/sessions/{key}", response_model=SessionRecord)
def save_session(
    key: str,
    request: SaveSessionRequest,
    store: SessionStore = Depends(get_session_store),
):
    """Save a reading position. An empty token list is rejected."""
    if not request.tokens:
        raise HTTPException(
            status_code=422,
            detail="A session needs at least one token",
        )
    sequence = TokenSequence(
        tokens=tuple(dto.to_token() for dto in request.tokens),
        language=request.language,
    )
    return store.save(key, sequence, request.cursor, request.language)


@router.get("/sessions/{key}", response_model=SessionRecord)
def get_session(key: str, store: SessionStore = Depends(get_session_store)):
    """Return a saved session with its cursor clamped into the sequence."""
    restored = store.load(key)
    if restored is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {key}",
        )
    return SessionRecord(
        language=restored.language,
        cursor=restored.cursor,
        tokens=[TokenDTO.from_token(token) for token in restored.sequence],
        saved_at=restored.saved_at,
    )


@router.delete("/sessions/{key}")
def delete_session(key: str, store: SessionStore = Depends(get_session_store)) -> dict:
    if not store.delete(key):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {key}",
        )
    return {"success": True}


# =============================================================================
# Preferences
# =============================================================================


@router.get("/preferences", response_model=ReaderPreferences)
def get_preferences(store: SessionStore = Depends(get_session_store)):
    return store.load_preferences()


@router.put("/preferences", response_model=ReaderPreferences)
def save_preferences(
    preferences: ReaderPreferences,
    store: SessionStore = Depends(get_session_store),
):
    store.save_preferences(preferences)
    return preferences
