"""Tests for catalog_import/common/config_loader.py"""

import pytest

from catalog_import.common.config_loader import (
    load_config,
    load_field_mapping,
    load_import_settings,
    load_platform_definitions,
)


class TestLoadFromConfigFiles:
    """Tests that load the real config YAML files shipped with the package."""

    def test_platform_definitions_in_detection_order(self):
        names = [p["name"] for p in load_platform_definitions()]
        assert names == ["shopify", "base", "stores_jp"]

    def test_shopify_definition(self):
        shopify = load_platform_definitions()[0]
        assert shopify["grouping"] == "multi_row"
        assert shopify["group_by_column"] == "Handle"
        assert shopify["default_field_map"]["Body (HTML)"] == "description"

    def test_japanese_headers_kept_verbatim(self):
        stores = load_platform_definitions()[2]
        assert "公開/非公開" in stores["header_patterns"]
        assert stores["default_field_map"]["割引価格"] == "compareAtPrice"

    def test_import_settings_defaults(self):
        settings = load_import_settings()
        assert settings["default_currency"] == "JPY"
        assert settings["default_category"] == ""

    def test_load_config_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent_file.yaml")


class TestLoadFieldMapping:
    def test_plain_mapping(self, tmp_path):
        path = tmp_path / "map.yaml"
        path.write_text("Product: name\nCost: price\nNotes: _skip\n", encoding="utf-8")
        assert load_field_mapping(path) == {"Product": "name", "Cost": "price", "Notes": "_skip"}

    def test_mapping_under_fields_key(self, tmp_path):
        path = tmp_path / "map.yaml"
        path.write_text("fields:\n  品名: name\n  価格: price\n", encoding="utf-8")
        assert load_field_mapping(path) == {"品名": "name", "価格": "price"}

    def test_null_value_becomes_empty(self, tmp_path):
        path = tmp_path / "map.yaml"
        path.write_text("Memo:\n", encoding="utf-8")
        assert load_field_mapping(path) == {"Memo": ""}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_field_mapping(tmp_path / "missing.yaml")

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "map.yaml"
        path.write_text("- name\n- price\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_field_mapping(path)
