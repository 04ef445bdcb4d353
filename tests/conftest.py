"""Shared test fixtures."""

from pathlib import Path

import pytest

from catalog_import.models import CanonicalField, TransformOptions

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SHOPIFY_HEADERS = [
    "Handle", "Title", "Body (HTML)", "Vendor", "Type", "Tags", "Published",
    "Option1 Name", "Option1 Value", "Option2 Name", "Option2 Value",
    "Variant SKU", "Variant Inventory Qty", "Variant Price",
    "Variant Compare At Price", "Image Src", "Image Position",
]

BASE_HEADERS = [
    "商品ID", "商品名", "種類ID", "種類名", "説明", "価格", "税率", "在庫数",
    "公開状態", "表示順", "種類在庫数", "画像1", "商品コード", "販売価格", "商品説明",
]

STORES_JP_HEADERS = [
    "アイテム名", "アイテムコード", "販売価格", "割引価格", "公開/非公開",
    "アイテム説明", "バリエーション", "在庫数",
]


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def options():
    """Import defaults used across transform tests."""
    return TransformOptions(default_category="uncategorized", default_currency="jpy")


@pytest.fixture
def shopify_headers():
    return list(SHOPIFY_HEADERS)


@pytest.fixture
def base_headers():
    return list(BASE_HEADERS)


@pytest.fixture
def stores_jp_headers():
    return list(STORES_JP_HEADERS)


@pytest.fixture
def shopify_field_map():
    """Shopify default mapping as produced for a full export header row."""
    return {
        "Title": CanonicalField.NAME,
        "Body (HTML)": CanonicalField.DESCRIPTION,
        "Vendor": CanonicalField.BRAND,
        "Type": CanonicalField.CATEGORY,
        "Tags": CanonicalField.TAGS,
        "Variant SKU": CanonicalField.SKU,
        "Variant Price": CanonicalField.PRICE,
        "Variant Compare At Price": CanonicalField.COMPARE_AT_PRICE,
        "Variant Inventory Qty": CanonicalField.STOCK,
        "Option1 Value": CanonicalField.COLOR,
        "Option2 Value": CanonicalField.SIZE,
        "Image Src": CanonicalField.IMAGE_URL,
        "Published": CanonicalField.STATUS,
    }


@pytest.fixture
def base_field_map():
    """BASE default mapping."""
    return {
        "商品名": CanonicalField.NAME,
        "商品コード": CanonicalField.SKU,
        "販売価格": CanonicalField.PRICE,
        "在庫数": CanonicalField.STOCK,
        "種類名": CanonicalField.COLOR,
        "商品説明": CanonicalField.DESCRIPTION,
        "画像URL": CanonicalField.IMAGE_URL,
        "公開状態": CanonicalField.STATUS,
    }


@pytest.fixture
def dress_rows():
    """Two-row Shopify product: one product, two color variants."""
    return [
        {
            "Handle": "dress-1",
            "Title": "Dress",
            "Vendor": "Acme",
            "Variant Price": "100",
            "Option1 Value": "Red",
            "Image Src": "https://x/1.jpg",
        },
        {
            "Handle": "dress-1",
            "Option1 Value": "Blue",
            "Image Src": "https://x/2.jpg",
        },
    ]
