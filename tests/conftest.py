"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from speedread.database import get_db, init_db
from speedread.main import app
from speedread.services.playback.clock import PlaybackClock
from speedread.services.playback.scheduler import ManualScheduler
from speedread.services.tokenizer import PlaybackConfig, Segmenter


@pytest.fixture
def db_session_factory():
    """In-memory SQLite database shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def db(db_session_factory):
    session = db_session_factory()
    yield session
    session.close()


@pytest.fixture
def client(db_session_factory):
    """Test client with the database dependency pointed at the test engine."""

    def override_get_db():
        session = db_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def plain_segmenter():
    """Segmenter without a CJK word segmenter."""
    return Segmenter(word_segmenter=None)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def config():
    """300 WPM (200ms per word) with punctuation pauses."""
    return PlaybackConfig(words_per_minute=300, pause_on_punctuation=True, pause_multiplier=2.2)


@pytest.fixture
def clock(scheduler, config):
    return PlaybackClock(scheduler, config=config)
