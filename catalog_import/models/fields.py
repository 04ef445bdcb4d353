"""
Identifier enums shared across the import pipeline.

Values are the exact strings used in configuration files and in
mappings coming from the review UI, so members compare equal to them.
"""

from enum import Enum


class CanonicalField(str, Enum):
    """Target attribute a source column can be mapped to."""
    NAME = 'name'
    NAME_EN = 'nameEn'
    DESCRIPTION = 'description'
    CATEGORY = 'category'
    PRICE = 'price'
    COMPARE_AT_PRICE = 'compareAtPrice'
    SKU = 'sku'
    COLOR = 'color'
    SIZE = 'size'
    STOCK = 'stock'
    IMAGE_URL = 'imageUrl'
    TAGS = 'tags'
    STATUS = 'status'
    BRAND = 'brand'
    MATERIALS = 'materials'
    CARE = 'care'
    UNMAPPED = '_skip'

    def __str__(self) -> str:
        return self.value


# A product cannot be built without these
REQUIRED_FIELDS = (CanonicalField.NAME, CanonicalField.PRICE)


class PlatformId(str, Enum):
    """Export formats the detector can recognise."""
    SHOPIFY = 'shopify'
    BASE = 'base'
    STORES_JP = 'stores_jp'
    UNKNOWN = 'unknown'

    def __str__(self) -> str:
        return self.value


class GroupingMode(str, Enum):
    """How a platform lays out variants of one product."""
    MULTI_ROW = 'multi_row'   # one product over rows sharing a group key
    NONE = 'none'             # one row per product

    def __str__(self) -> str:
        return self.value
