"""
Row transformation.

Modules:
    normalizers - price, stock, status and text parsing
    sku - SkuDeduplicator for per-import SKU uniqueness
    product_fields - field lookup and product-level validation
    grouped - multi-row (Shopify) strategy
    flat - one-row-per-product strategy
    transformer - transform_csv_to_products entry point
"""

from .flat import transform_flat_rows
from .grouped import group_rows, transform_grouped_rows
from .normalizers import (
    parse_price,
    parse_status,
    parse_stock,
    split_image_urls,
    split_tags,
    strip_html,
)
from .product_fields import build_product, get_field
from .sku import SkuDeduplicator
from .transformer import transform_csv_to_products

__all__ = [
    'transform_csv_to_products',
    'transform_flat_rows',
    'transform_grouped_rows',
    'group_rows',
    'SkuDeduplicator',
    'build_product',
    'get_field',
    'parse_price',
    'parse_status',
    'parse_stock',
    'split_image_urls',
    'split_tags',
    'strip_html',
]
