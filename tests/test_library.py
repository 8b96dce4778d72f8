"""Tests for converting catalog rows into LibraryItem snapshots."""

from advanced_sorting.models import LibraryItemRecord, MediaSourceRecord, MediaStreamRecord
from advanced_sorting.services.library import LibraryItem, MediaSourceInfo, MediaStreamInfo, _to_library_item
from advanced_sorting.services.sort_keys import get_file_size, get_imdb_id, get_video_bitrate


def _record() -> LibraryItemRecord:
    return LibraryItemRecord(
        item_id="item-1",
        name="The Shawshank Redemption",
        production_year=1994,
        community_rating=9.3,
        size=1_000,
        provider_ids_json='{"Imdb": "tt0111161", "Tmdb": 278}',
        media_sources=[
            MediaSourceRecord(
                position=0,
                size=4_000_000_000,
                bitrate=9_000_000,
                streams=[
                    MediaStreamRecord(stream_index=0, stream_type="Audio", bit_rate=640_000),
                    MediaStreamRecord(stream_index=1, stream_type="Video", bit_rate=8_000_000),
                ],
            ),
            MediaSourceRecord(position=1, size=700_000_000, bitrate=2_000_000),
        ],
    )


class TestToLibraryItem:
    """Tests for _to_library_item."""

    def test_item_fields(self):
        item = _to_library_item(_record())
        assert item.id == "item-1"
        assert item.name == "The Shawshank Redemption"
        assert item.production_year == 1994
        assert item.community_rating == 9.3
        assert item.size == 1_000
        assert item.provider_ids == {"Imdb": "tt0111161", "Tmdb": "278"}

    def test_sources_and_streams_keep_order(self):
        item = _to_library_item(_record())
        assert item.media_sources == (
            MediaSourceInfo(
                size=4_000_000_000,
                bitrate=9_000_000,
                streams=(
                    MediaStreamInfo(stream_type="Audio", bit_rate=640_000),
                    MediaStreamInfo(stream_type="Video", bit_rate=8_000_000),
                ),
            ),
            MediaSourceInfo(size=700_000_000, bitrate=2_000_000),
        )

    def test_sort_keys_read_converted_item(self):
        item = _to_library_item(_record())
        assert get_video_bitrate(item) == 8_000_000
        assert get_file_size(item) == 4_000_000_000
        assert get_imdb_id(item) == "tt0111161"

    def test_bare_record(self):
        item = _to_library_item(LibraryItemRecord(item_id="item-2", name="Unknown"))
        assert item == LibraryItem(id="item-2", name="Unknown")
        assert get_video_bitrate(item) == 0
        assert get_imdb_id(item) is None
