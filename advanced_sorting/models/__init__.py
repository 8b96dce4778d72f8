"""SQLAlchemy ORM models.

Models represent the media library catalog:
- library_items: Movies and other entries with provider IDs and ratings
- media_sources: Files/versions of an item (size, container bitrate)
- media_streams: Streams inside a source (video bitrate)
"""

from advanced_sorting.models.library_item import LibraryItemRecord
from advanced_sorting.models.media_source import MediaSourceRecord, MediaStreamRecord

__all__ = ["LibraryItemRecord", "MediaSourceRecord", "MediaStreamRecord"]
