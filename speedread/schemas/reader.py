"""Pydantic schemas for tokenization and pivot endpoints."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from speedread.schemas.token import TokenDTO


class SegmentationMode(str, Enum):
    PARAGRAPHS = "paragraphs"
    WORDS = "words"


class TokenizeRequest(BaseModel):
    text: str | None = None
    html: str | None = None
    language: str = Field("en", min_length=2, max_length=16)
    mode: SegmentationMode = SegmentationMode.PARAGRAPHS

    @model_validator(mode="after")
    def check_payload(self) -> "TokenizeRequest":
        if (self.text is None) == (self.html is None):
            raise ValueError("Provide exactly one of 'text' or 'html'")
        return self


class TokenizeResponse(BaseModel):
    language: str
    tokenizer_version: str
    total_tokens: int
    word_count: int
    is_cjk: bool
    estimated_reading_time: str
    tokens: list[TokenDTO]


class PivotResponse(BaseModel):
    word: str
    pivot_index: int
    left: str
    pivot: str
    right: str
