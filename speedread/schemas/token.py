"""Pydantic schemas for token payloads."""

from pydantic import BaseModel, ConfigDict, Field

from speedread.services.tokenizer.types import Token


class SchemaBase(BaseModel):
    """Base schema with attribute support for dataclass conversion."""

    model_config = ConfigDict(from_attributes=True)


class TokenDTO(SchemaBase):
    id: str = Field(..., min_length=1)
    word: str
    raw: str
    has_pause: bool = False
    is_paragraph_start: bool = False

    @classmethod
    def from_token(cls, token: Token) -> "TokenDTO":
        return cls.model_validate(token)

    def to_token(self) -> Token:
        return Token(
            id=self.id,
            word=self.word,
            raw=self.raw,
            has_pause=self.has_pause,
            is_paragraph_start=self.is_paragraph_start,
        )
