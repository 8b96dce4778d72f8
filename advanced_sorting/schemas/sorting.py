"""Schemas for the /AdvancedSorting endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class SortedItemResult(BaseModel):
    """A library item with the value it was sorted by."""

    id: str
    name: str | None = None
    year: int | None = None
    sort_value: int = Field(alias="sortValue")
    sort_display_value: str | None = Field(alias="sortDisplayValue", default=None)
    imdb_id: str | None = Field(alias="imdbId", default=None)

    model_config = {"populate_by_name": True}


class ImdbTopListStatus(BaseModel):
    """Size and freshness of the IMDb Top list."""

    entry_count: int = Field(alias="entryCount", ge=0)
    last_updated: datetime = Field(alias="lastUpdated")

    model_config = {"populate_by_name": True}
