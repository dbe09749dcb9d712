"""Tests for the document category table."""

import json

import pytest
from pydantic import ValidationError

from docsort.config import get_settings
from docsort.services.categories import (
    DEFAULT_CATEGORIES,
    CategoryConfigError,
    category_display_name,
    get_categories,
    load_categories,
)
from docsort.services.document_classifier import classify_document


@pytest.fixture
def clear_caches():
    """Reset cached settings and category table around a test."""
    get_settings.cache_clear()
    get_categories.cache_clear()
    yield
    get_settings.cache_clear()
    get_categories.cache_clear()


def _write(tmp_path, payload):
    path = tmp_path / "categories.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestDefaultCategories:
    """Tests for the built-in table."""

    def test_order(self):
        assert [c.id for c in DEFAULT_CATEGORIES] == [
            "nomina", "contrato", "dni", "justificante", "otros",
        ]

    def test_every_category_has_keywords(self):
        for category in DEFAULT_CATEGORIES:
            assert len(category.keywords) > 0

    def test_ids_are_unique(self):
        ids = [c.id for c in DEFAULT_CATEGORIES]
        assert len(ids) == len(set(ids))

    def test_table_is_immutable(self):
        assert isinstance(DEFAULT_CATEGORIES, tuple)
        with pytest.raises(ValidationError):
            DEFAULT_CATEGORIES[0].id = "changed"

    def test_accented_keyword_collapses_into_plain_one(self):
        nomina = DEFAULT_CATEGORIES[0]
        assert nomina.keywords.count("nomina") == 1
        assert "nómina" not in nomina.keywords

    def test_display_names(self):
        assert category_display_name("nomina", DEFAULT_CATEGORIES) == "Nómina"
        assert category_display_name("otros", DEFAULT_CATEGORIES) == "Otros"
        assert category_display_name("factura", DEFAULT_CATEGORIES) == "Documento"


class TestLoadCategories:
    """Tests for loading a category table from JSON."""

    def test_load_list(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "factura", "display_name": "Factura", "keywords": ["factura"]},
            {"id": "otros", "display_name": "Otros", "keywords": ["varios"]},
        ])
        categories = load_categories(path)
        assert [c.id for c in categories] == ["factura", "otros"]
        assert categories[0].keywords == ("factura",)

    def test_load_wrapped_with_name_key(self, tmp_path):
        path = _write(tmp_path, {"categories": [
            {"id": "otros", "name": "Otros", "keywords": ["varios"]},
        ]})
        categories = load_categories(path)
        assert categories[0].display_name == "Otros"

    def test_missing_fallback_rejected(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "factura", "display_name": "Factura", "keywords": ["factura"]},
        ])
        with pytest.raises(CategoryConfigError) as exc_info:
            load_categories(path)
        assert "otros" in str(exc_info.value)

    def test_duplicate_ids_rejected(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "otros", "display_name": "Otros", "keywords": ["a"]},
            {"id": "otros", "display_name": "Otros 2", "keywords": ["b"]},
        ])
        with pytest.raises(CategoryConfigError) as exc_info:
            load_categories(path)
        assert "duplicate" in str(exc_info.value).lower()

    def test_empty_keywords_rejected(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "otros", "display_name": "Otros", "keywords": []},
        ])
        with pytest.raises(CategoryConfigError):
            load_categories(path)

    def test_blank_keyword_rejected(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "otros", "display_name": "Otros", "keywords": ["  "]},
        ])
        with pytest.raises(CategoryConfigError):
            load_categories(path)

    def test_keywords_are_normalized(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "factura", "display_name": "Factura", "keywords": ["Factura", "Recibo Médico"]},
            {"id": "otros", "display_name": "Otros", "keywords": ["varios"]},
        ])
        categories = load_categories(path)

        assert categories[0].keywords == ("factura", "recibo medico")
        assert classify_document("FACTURA_enero.pdf", [], categories).document_category == "factura"
        assert classify_document("recibo_medico.pdf", [], categories).document_category == "factura"

    def test_punctuation_only_keyword_rejected(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "otros", "display_name": "Otros", "keywords": ["--"]},
        ])
        with pytest.raises(CategoryConfigError):
            load_categories(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CategoryConfigError) as exc_info:
            load_categories(path)
        assert "not valid json" in str(exc_info.value).lower()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CategoryConfigError):
            load_categories(tmp_path / "missing.json")

    def test_wrong_shape(self, tmp_path):
        path = _write(tmp_path, {"items": []})
        with pytest.raises(CategoryConfigError):
            load_categories(path)

    def test_error_is_value_error(self):
        assert issubclass(CategoryConfigError, ValueError)


class TestGetCategories:
    """Tests for the process-wide table."""

    def test_defaults_without_file(self, monkeypatch, clear_caches):
        monkeypatch.delenv("CATEGORIES_FILE", raising=False)
        assert get_categories() == DEFAULT_CATEGORIES

    def test_uses_configured_file(self, monkeypatch, tmp_path, clear_caches):
        path = _write(tmp_path, [
            {"id": "factura", "display_name": "Factura", "keywords": ["factura"]},
            {"id": "otros", "display_name": "Otros", "keywords": ["varios"]},
        ])
        monkeypatch.setenv("CATEGORIES_FILE", str(path))
        assert [c.id for c in get_categories()] == ["factura", "otros"]

    def test_loaded_once(self, monkeypatch, clear_caches):
        monkeypatch.delenv("CATEGORIES_FILE", raising=False)
        assert get_categories() is get_categories()
