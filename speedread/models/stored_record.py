"""Key-value record model backing session and preference persistence."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, String, Text

from speedread.database import Base


class StoredRecord(Base):
    """SQLAlchemy model for a JSON document stored under a string key."""

    __tablename__ = "stored_records"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
