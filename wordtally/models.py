"""SQLAlchemy ORM models."""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from wordtally.database import Base

# JSONB on PostgreSQL, plain JSON text elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")

# Minimum frequency for each label, highest first
FREQUENCY_TIERS = (
    (30, "mythic"),
    (20, "legendary"),
    (10, "epic"),
    (5, "rare"),
)


def new_word_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(timezone.utc)


class Word(Base):
    """A word seen in submitted text, with its count and cached dictionary details."""

    __tablename__ = "words"
    __table_args__ = (
        Index("idx_words_frequency", "frequency"),
        Index("idx_words_created_at", "created_at"),
        Index("idx_words_last_fetched_at", "last_fetched_at"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_word_id)
    word: Mapped[str] = mapped_column(Text, unique=True)
    frequency: Mapped[int] = mapped_column(default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    # Dictionary details, replaced together on every successful fetch
    pronunciation: Mapped[str | None] = mapped_column(Text, nullable=True)
    pronunciations: Mapped[list[dict[str, Any]] | None] = mapped_column(JSONType, nullable=True)
    definitions: Mapped[list[dict[str, Any]] | None] = mapped_column(JSONType, nullable=True)
    examples: Mapped[list[str] | None] = mapped_column(JSONType, nullable=True)
    last_fetched_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    @property
    def has_details(self) -> bool:
        """Check if dictionary details were ever stored."""
        return bool(self.pronunciation or self.definitions)

    @property
    def tier(self) -> str:
        """Get the frequency label shown next to the word."""
        for minimum, label in FREQUENCY_TIERS:
            if self.frequency >= minimum:
                return label
        return "common"

    @property
    def audio_url(self) -> str | None:
        """Get the first pronunciation audio URL, if any."""
        for variant in self.pronunciations or []:
            if variant.get("audio"):
                return str(variant["audio"])
        return None

    def __repr__(self) -> str:
        return f"<Word {self.word!r} x{self.frequency}>"
