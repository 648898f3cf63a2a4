"""Tokenization and pivot API routes."""

import logging

from fastapi import APIRouter, HTTPException, Query

from speedread.config import get_settings
from speedread.schemas.reader import (
    PivotResponse,
    SegmentationMode,
    TokenizeRequest,
    TokenizeResponse,
)
from speedread.schemas.token import TokenDTO
from speedread.services.tokenizer import (
    PlaybackConfig,
    Segmenter,
    contains_cjk,
    estimate_reading_time_formatted,
    get_tokenizer_version,
    pivot_index,
    split_for_display,
    strip_html,
)

router = APIRouter()
logger = logging.getLogger(__name__)

_segmenter: Segmenter | None = None


def get_segmenter() -> Segmenter:
    global _segmenter
    if _segmenter is None:
        _segmenter = Segmenter()
    return _segmenter


@router.post("/tokenize", response_model=TokenizeResponse)
def tokenize(request: TokenizeRequest) -> TokenizeResponse:
    """Segment pasted text or HTML into playback tokens."""
    settings = get_settings()
    text = request.text if request.text is not None else strip_html(request.html)

    if len(text) > settings.max_input_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds {settings.max_input_chars} characters",
        )

    segmenter = get_segmenter()
    if request.mode is SegmentationMode.WORDS:
        sequence = segmenter.segment_words(text, request.language)
    else:
        sequence = segmenter.segment(text, request.language)

    logger.info("Tokenized %d chars into %d tokens", len(text), len(sequence))
    return TokenizeResponse(
        language=sequence.language,
        tokenizer_version=get_tokenizer_version(),
        total_tokens=len(sequence),
        word_count=sequence.word_count,
        is_cjk=contains_cjk(text),
        estimated_reading_time=estimate_reading_time_formatted(
            sequence, PlaybackConfig.from_settings(settings)
        ),
        tokens=[TokenDTO.from_token(token) for token in sequence],
    )


@router.get("/pivot", response_model=PivotResponse)
def pivot(word: str = Query(..., min_length=1)) -> PivotResponse:
    """Return the pivot letter of a word and the display split around it."""
    left, letter, right = split_for_display(word)
    return PivotResponse(
        word=word,
        pivot_index=pivot_index(word),
        left=left,
        pivot=letter,
        right=right,
    )
