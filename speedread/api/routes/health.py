"""Health check API route."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from speedread import __version__
from speedread.database import get_db
from speedread.services.tokenizer import cjk_segmentation_available, get_tokenizer_version

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health_check(db: Session = Depends(get_db)) -> dict:
    """Health check endpoint."""
    try:
        db.execute(text("SELECT 1"))
        db_connected = True
    except SQLAlchemyError:
        logger.exception("Health check DB query failed")
        db_connected = False

    return {
        "status": "ok" if db_connected else "degraded",
        "database": "connected" if db_connected else "unavailable",
        "cjk_segmentation": cjk_segmentation_available(),
        "tokenizer_version": get_tokenizer_version(),
        "version": __version__,
    }
