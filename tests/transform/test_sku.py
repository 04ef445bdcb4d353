"""Tests for catalog_import/transform/sku.py"""

from catalog_import.transform.sku import SkuDeduplicator


class TestSkuDeduplicator:
    def test_first_use_unchanged(self):
        skus = SkuDeduplicator()
        assert skus.resolve("ABC", row=2) == ("ABC", None)
        assert "ABC" in skus

    def test_duplicate_gets_suffix_and_warning(self):
        skus = SkuDeduplicator()
        skus.resolve("ABC", row=2)
        sku, warning = skus.resolve("ABC", row=5)
        assert sku == "ABC-2"
        assert warning.row == 5
        assert warning.field == "sku"
        assert "ABC" in warning.message and "ABC-2" in warning.message

    def test_suffix_increments(self):
        skus = SkuDeduplicator()
        results = [skus.resolve("ABC", row=i)[0] for i in range(2, 6)]
        assert results == ["ABC", "ABC-2", "ABC-3", "ABC-4"]

    def test_skips_taken_suffix(self):
        skus = SkuDeduplicator()
        skus.resolve("ABC", row=2)
        skus.resolve("ABC-2", row=3)
        assert skus.resolve("ABC", row=4)[0] == "ABC-3"

    def test_empty_sku_never_reserved(self):
        skus = SkuDeduplicator()
        assert skus.resolve("", row=2) == ("", None)
        assert skus.resolve("", row=3) == ("", None)
        assert len(skus) == 0

    def test_instances_independent(self):
        first = SkuDeduplicator()
        first.resolve("ABC", row=2)
        assert SkuDeduplicator().resolve("ABC", row=2) == ("ABC", None)
