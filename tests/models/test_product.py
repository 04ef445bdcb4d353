"""Tests for catalog_import/models/product.py"""

import pytest

from catalog_import.models import VualProduct, VualProductImage, VualProductVariant


class TestVualProductImage:
    def test_color_defaults_to_unscoped(self):
        img = VualProductImage(url="https://x/1.jpg")
        assert img.color is None


class TestVualProductVariant:
    def test_default_variant(self):
        variant = VualProductVariant()
        assert variant.color is None
        assert variant.size is None
        assert variant.sku == ""
        assert variant.stock == 0
        assert variant.price_override is None


class TestVualProduct:
    def test_create_minimal(self):
        product = VualProduct(name="Dress", price=100.0, category="dresses", currency="JPY")
        assert product.status == "draft"
        assert product.images == []
        assert product.variants == []
        assert product.tags is None

    def test_zero_price_allowed(self):
        assert VualProduct(name="Free", price=0.0, category="", currency="JPY").price == 0.0

    def test_raises_on_empty_name(self):
        with pytest.raises(ValueError, match="name is required"):
            VualProduct(name="", price=1.0, category="", currency="JPY")

    def test_raises_on_negative_price(self):
        with pytest.raises(ValueError, match="non-negative"):
            VualProduct(name="X", price=-1.0, category="", currency="JPY")

    def test_raises_on_unknown_status(self):
        with pytest.raises(ValueError, match="status"):
            VualProduct(name="X", price=1.0, category="", currency="JPY", status="active")
