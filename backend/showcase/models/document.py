"""StoredDocument ORM — one row per store key holding the whole serialized collection.

Invariants:
    - store_key is the primary key (one document per store)
    - payload is a JSON array of field-named objects, written in a single UPDATE/INSERT
    - updated_at moves on every save

Design Decisions:
    - Text column over JSON column: a malformed payload must be readable as raw
      text so persistence can fail soft instead of raising inside the driver
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from showcase.db.base import Base


class StoredDocument(Base):
    """A store's whole collection, keyed by store identifier."""
    __tablename__ = "documents"

    store_key: Mapped[str] = mapped_column(String(100), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
