"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from docsort.config import Settings, get_settings


class TestSettings:
    """Test Settings class validation and loading."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("LOG_LEVEL", "CATEGORIES_FILE", "DEFAULT_EXTENSION"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        """Test that Settings loads with no environment variables set."""
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.categories_file is None
        assert settings.default_extension == "pdf"

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " debug ")

        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level_raises_error(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "log_level" in str(exc_info.value).lower()

    def test_categories_file_must_exist(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CATEGORIES_FILE", str(tmp_path / "missing.json"))

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "categories_file" in str(exc_info.value).lower()

    def test_categories_file_accepted(self, monkeypatch, tmp_path):
        path = tmp_path / "categories.json"
        path.write_text("[]", encoding="utf-8")
        monkeypatch.setenv("CATEGORIES_FILE", str(path))

        assert Settings().categories_file == path

    def test_blank_categories_file_is_none(self, monkeypatch):
        monkeypatch.setenv("CATEGORIES_FILE", "")

        assert Settings().categories_file is None

    def test_default_extension_is_cleaned(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_EXTENSION", ".PDF")

        assert Settings().default_extension == "pdf"

    def test_empty_default_extension_raises_error(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_EXTENSION", ".")

        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
