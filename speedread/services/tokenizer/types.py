"""
Value types for the tokenizer package.

A Token is one unit of playback: a word, or a silent pause marker with an
empty ``word``. A TokenSequence is the immutable, ordered result of
segmenting one document or chapter.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple, overload


@dataclass(frozen=True)
class Token:
    """A single display unit in the playback sequence.

    Attributes:
        id: Identifier, unique within its sequence.
        word: The display string; empty for a pause-only token.
        raw: The original surface form before normalization.
        has_pause: Whether an extended delay applies before advancing past it.
        is_paragraph_start: Whether this token begins a new paragraph.
    """

    id: str
    word: str
    raw: str
    has_pause: bool = False
    is_paragraph_start: bool = False

    @property
    def is_pause_marker(self) -> bool:
        """Pause markers are timed but never rendered."""
        return self.word == ""


@dataclass(frozen=True)
class TokenSequence:
    """Ordered, immutable list of tokens for one document."""

    tokens: Tuple[Token, ...] = field(default_factory=tuple)
    language: str = "en"

    @classmethod
    def empty(cls, language: str = "en") -> "TokenSequence":
        return cls(tokens=(), language=language)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Token, ...]: ...

    def __getitem__(self, index):
        return self.tokens[index]

    def __bool__(self) -> bool:
        return bool(self.tokens)

    @property
    def words(self) -> list[str]:
        """Display strings of all tokens, pause markers included."""
        return [token.word for token in self.tokens]

    @property
    def word_count(self) -> int:
        """Number of renderable (non-pause) tokens."""
        return sum(1 for token in self.tokens if not token.is_pause_marker)

    def slice(self, start: int, end: int) -> Tuple[Token, ...]:
        """Return tokens in ``[start, end)``, clamped to the sequence bounds."""
        start = max(0, start)
        end = min(len(self.tokens), end)
        if start >= end:
            return ()
        return self.tokens[start:end]
