from pathlib import Path

import pytest

from advanced_sorting.settings import Settings


def test_imdb_top_list_path_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PLUGIN_CONFIGURATIONS_PATH", str(tmp_path))
    settings = Settings(_env_file=None)
    assert settings.imdb_top_list_path == tmp_path / "AdvancedSorting_ImdbTop250.json"


def test_async_database_url_adds_driver() -> None:
    settings = Settings(_env_file=None, database_url="postgresql://u:p@db:5432/lib")
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/lib"


def test_cors_origins_comma_separated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, http://localhost:8096")
    settings = Settings(_env_file=None)
    assert settings.cors_origins == ["https://a.example", "http://localhost:8096"]


def test_imdb_sorting_enabled_by_default() -> None:
    assert Settings(_env_file=None).enable_imdb_top_sorting is True
