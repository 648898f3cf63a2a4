"""Pydantic schemas for the speed-reading API."""

from speedread.schemas.reader import (
    PivotResponse,
    SegmentationMode,
    TokenizeRequest,
    TokenizeResponse,
)
from speedread.schemas.session import (
    ReaderPreferences,
    SessionRecord,
    SessionSummary,
)
from speedread.schemas.token import TokenDTO

__all__ = [
    # Token schemas
    "TokenDTO",
    # Tokenize schemas
    "SegmentationMode",
    "TokenizeRequest",
    "TokenizeResponse",
    "PivotResponse",
    # Session schemas
    "SessionRecord",
    "SessionSummary",
    "ReaderPreferences",
]
