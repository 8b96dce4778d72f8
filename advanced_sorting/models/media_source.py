"""Media source and stream models.

A library item can have several media sources (files/versions); each source
has ordered streams (video, audio, subtitle).
"""

from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from advanced_sorting.stores.postgres import Base


class MediaSourceRecord(Base):
    """A playable file/version of a library item."""

    __tablename__ = "media_sources"

    id: Mapped[int] = mapped_column(primary_key=True)
    item_id: Mapped[int] = mapped_column(ForeignKey("library_items.id", ondelete="CASCADE"), index=True)

    # First source (position 0) is the primary one
    position: Mapped[int] = mapped_column(default=0)

    path: Mapped[str | None] = mapped_column(String(1000))
    size: Mapped[int | None] = mapped_column(BigInteger)  # bytes
    bitrate: Mapped[int | None] = mapped_column()  # bits per second, whole container

    item: Mapped["LibraryItemRecord"] = relationship(back_populates="media_sources")
    streams: Mapped[list["MediaStreamRecord"]] = relationship(
        back_populates="source",
        order_by="MediaStreamRecord.stream_index",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<MediaSourceRecord item={self.item_id} pos={self.position}>"


class MediaStreamRecord(Base):
    """A single stream inside a media source."""

    __tablename__ = "media_streams"

    id: Mapped[int] = mapped_column(primary_key=True)
    source_id: Mapped[int] = mapped_column(ForeignKey("media_sources.id", ondelete="CASCADE"), index=True)

    stream_index: Mapped[int] = mapped_column(default=0)
    stream_type: Mapped[str] = mapped_column(String(20))  # Video, Audio, Subtitle
    codec: Mapped[str | None] = mapped_column(String(50))
    bit_rate: Mapped[int | None] = mapped_column()

    source: Mapped["MediaSourceRecord"] = relationship(back_populates="streams")
