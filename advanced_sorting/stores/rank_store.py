"""IMDb Top list store backed by a JSON file.

Handles:
- In-memory IMDb ID -> rank table (case-insensitive keys)
- Persistence to the plugin configuration directory
- Default seed on first start, corrupt file or empty list

Readers never lock: the table is an immutable snapshot that is swapped whole
on every update. Writers are serialized so disk order matches memory order.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
import os
from pathlib import Path
import threading
from types import MappingProxyType

from pydantic import BaseModel, Field

from advanced_sorting.services.imdb_top_list import DEFAULT_IMDB_TOP_LIST

logger = logging.getLogger("uvicorn.error")

NEVER_UPDATED = datetime.min.replace(tzinfo=timezone.utc)


def normalize_id(external_id: str) -> str:
    """Canonical key form for external IDs."""
    return external_id.strip().lower()


@dataclass(frozen=True)
class RankTable:
    """Immutable snapshot of the rank table."""

    entries: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    last_updated: datetime = NEVER_UPDATED

    @classmethod
    def build(cls, rankings: Mapping[str, int], last_updated: datetime) -> "RankTable":
        normalized = {normalize_id(key): int(rank) for key, rank in rankings.items()}
        return cls(entries=MappingProxyType(normalized), last_updated=last_updated)


class RankFile(BaseModel):
    """On-disk document: {"lastUpdated": ..., "rankings": {...}}."""

    last_updated: datetime = Field(alias="lastUpdated", default=NEVER_UPDATED)
    rankings: dict[str, int] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}


class RankStore:
    """Owns the IMDb Top rank table and its persisted mirror.

    Construct once per process and pass it to consumers; loading happens in
    the constructor.
    """

    def __init__(self, data_file_path: Path | str):
        self._data_file_path = Path(data_file_path)
        self._write_lock = threading.Lock()
        self._table = RankTable()
        self._load_from_disk()

    @property
    def data_file_path(self) -> Path:
        return self._data_file_path

    def snapshot(self) -> RankTable:
        """Current table; entries and last_updated always belong to the same update."""
        return self._table

    @property
    def count(self) -> int:
        return len(self._table.entries)

    @property
    def last_updated(self) -> datetime:
        return self._table.last_updated

    def get_rank(self, imdb_id: str) -> int | None:
        """Get the rank for an IMDb ID (e.g. "tt0111161").

        Returns:
            The rank, or None if the ID is not on the list.
        """
        if not imdb_id:
            return None
        return self._table.entries.get(normalize_id(imdb_id))

    def get_all_ranks(self) -> dict[str, int]:
        """Get a copy of the current rankings."""
        return dict(self._table.entries)

    def update_list(self, rankings: Mapping[str, int]) -> None:
        """Replace the entire list and persist it.

        A failed write is logged; the in-memory list stays replaced.
        """
        table = RankTable.build(rankings, datetime.now(timezone.utc))
        with self._write_lock:
            self._table = table
            self._save_to_disk(table)
        logger.info(f"IMDb Top list updated with {len(table.entries)} entries")

    def load_default_list(self) -> None:
        """Replace the list with the built-in seed."""
        self.update_list(DEFAULT_IMDB_TOP_LIST)
        logger.info(f"Loaded default IMDb Top 250 list with {len(DEFAULT_IMDB_TOP_LIST)} entries")

    def _save_to_disk(self, table: RankTable) -> None:
        try:
            document = RankFile(
                last_updated=table.last_updated,
                rankings=dict(table.entries),
            )
            payload = document.model_dump_json(by_alias=True, indent=2)

            self._data_file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._data_file_path.with_name(self._data_file_path.name + ".tmp")
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self._data_file_path)
        except OSError:
            logger.exception(f"Failed to save IMDb Top list to {self._data_file_path}")

    def _load_from_disk(self) -> None:
        if not self._data_file_path.exists():
            logger.info("No saved IMDb Top list found, loading defaults")
            self.load_default_list()
            return

        try:
            raw = self._data_file_path.read_text(encoding="utf-8")
            document = RankFile.model_validate_json(raw)
        except (OSError, ValueError):
            # pydantic.ValidationError is a ValueError
            logger.exception("Failed to load IMDb Top list from disk, loading defaults")
            self.load_default_list()
            return

        if not document.rankings:
            self.load_default_list()
            return

        last_updated = document.last_updated
        if last_updated.tzinfo is None:
            last_updated = last_updated.replace(tzinfo=timezone.utc)

        self._table = RankTable.build(document.rankings, last_updated)
        logger.info(f"Loaded IMDb Top list with {self.count} entries from disk")
