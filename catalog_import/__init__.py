"""
Catalog CSV Import

Turns product CSV exports from other commerce platforms (Shopify, BASE,
STORES.jp) into normalized products with variants and images.

Modules:
    models      - Data models (VualProduct, TransformResult, CanonicalField)
    common      - Shared utilities (config loader, CSV reading, logging, text)
    platforms   - Platform detection and column mapping
    transform   - Row transformation (grouped and flat strategies)

Usage:
    platform = detect_platform(headers)
    field_map = get_default_field_map(platform, headers)
    result = transform_csv_to_products(rows, field_map, platform,
                                       TransformOptions(default_currency="JPY"))
"""

from .models import (
    CanonicalField,
    PlatformId,
    TransformError,
    TransformOptions,
    TransformResult,
    TransformWarning,
    VualProduct,
    VualProductImage,
    VualProductVariant,
)
from .platforms import (
    FieldMapError,
    PlatformConfigError,
    detect_platform,
    get_default_field_map,
    missing_required_fields,
    normalize_field_map,
)
from .transform import transform_csv_to_products

__all__ = [
    'CanonicalField',
    'PlatformId',
    'TransformError',
    'TransformOptions',
    'TransformResult',
    'TransformWarning',
    'VualProduct',
    'VualProductImage',
    'VualProductVariant',
    'FieldMapError',
    'PlatformConfigError',
    'detect_platform',
    'get_default_field_map',
    'missing_required_fields',
    'normalize_field_map',
    'transform_csv_to_products',
]
