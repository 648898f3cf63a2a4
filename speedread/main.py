"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from speedread import __version__
from speedread.api.routes import health, sessions, tokens
from speedread.config import get_settings
from speedread.database import init_db
from speedread.logging_config import setup_logging

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create tables before serving requests."""
    setup_logging(settings.log_level, settings.log_file)
    init_db()
    logger.info("%s %s ready", settings.app_name, __version__)
    yield
    logger.info("%s shutting down", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Tokenization, pivots and resumable sessions for RSVP reading",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

for module, tag in ((health, "health"), (tokens, "tokens"), (sessions, "sessions")):
    app.include_router(module.router, prefix="/api", tags=[tag])


@app.get("/")
def root():
    """Service info."""
    return {
        "service": "Speedread API",
        "version": __version__,
        "docs": "/docs" if settings.debug else None,
    }
