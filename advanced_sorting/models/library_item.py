"""Library item model.

A library item is a movie (or other media entry) known to the media server,
with its provider IDs (e.g. {"Imdb": "tt0111161"}) and community rating.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import BigInteger, Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from advanced_sorting.stores.postgres import Base


def generate_item_id() -> str:
    """Generate unique item ID."""
    return str(uuid4())


class LibraryItemRecord(Base):
    """Media library entry."""

    __tablename__ = "library_items"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Public item ID (used in API responses)
    item_id: Mapped[str] = mapped_column(
        String(36),
        unique=True,
        index=True,
        default=generate_item_id,
    )

    item_type: Mapped[str] = mapped_column(String(50), index=True, default="Movie")
    name: Mapped[str] = mapped_column(String(500))
    production_year: Mapped[int | None] = mapped_column()
    community_rating: Mapped[float | None] = mapped_column()
    size: Mapped[int | None] = mapped_column(BigInteger)  # bytes

    # JSON object: provider name -> external ID
    provider_ids_json: Mapped[str | None] = mapped_column(Text)

    is_virtual: Mapped[bool] = mapped_column(Boolean, default=False)

    media_sources: Mapped[list["MediaSourceRecord"]] = relationship(
        back_populates="item",
        order_by="MediaSourceRecord.position",
        cascade="all, delete-orphan",
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<LibraryItemRecord {self.item_id} {self.name!r}>"
