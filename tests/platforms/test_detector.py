"""Tests for catalog_import/platforms/detector.py"""

from catalog_import.models import PlatformId
from catalog_import.platforms.config import get_platform_config
from catalog_import.platforms.detector import detect_platform


class TestDetectPlatform:
    def test_shopify_export(self, shopify_headers):
        assert detect_platform(shopify_headers) == PlatformId.SHOPIFY

    def test_base_export(self, base_headers):
        assert detect_platform(base_headers) == PlatformId.BASE

    def test_stores_jp_export(self, stores_jp_headers):
        assert detect_platform(stores_jp_headers) == PlatformId.STORES_JP

    def test_exact_signatures_plus_unrelated_headers(self):
        for platform in (PlatformId.SHOPIFY, PlatformId.BASE, PlatformId.STORES_JP):
            signatures = list(get_platform_config(platform).header_patterns)
            headers = ["Memo", "Internal ID"] + signatures + ["Extra"]
            assert detect_platform(headers) == platform

    def test_order_irrelevant(self, shopify_headers):
        assert detect_platform(reversed(shopify_headers)) == PlatformId.SHOPIFY

    def test_headers_trimmed(self):
        assert detect_platform([" Handle", "Title ", " Vendor "]) == PlatformId.SHOPIFY

    def test_case_must_match(self):
        assert detect_platform(["handle", "title", "vendor", "variant sku"]) == PlatformId.UNKNOWN

    def test_fewer_than_three_matches_is_unknown(self):
        assert detect_platform(["Handle", "Title", "Price", "Stock"]) == PlatformId.UNKNOWN

    def test_three_matches_is_enough(self):
        # 3/10 for Shopify
        assert detect_platform(["Handle", "Title", "Vendor", "Price"]) == PlatformId.SHOPIFY

    def test_higher_ratio_wins(self):
        # BASE: 3/9, STORES.jp: 4/7 (販売価格 is shared)
        headers = ["商品名", "商品コード", "販売価格", "アイテム名", "アイテムコード", "割引価格"]
        assert detect_platform(headers) == PlatformId.STORES_JP

    def test_empty_headers(self):
        assert detect_platform([]) == PlatformId.UNKNOWN

    def test_is_pure(self, shopify_headers):
        headers = list(shopify_headers)
        first = detect_platform(headers)
        second = detect_platform(headers)
        assert first == second
        assert headers == shopify_headers
