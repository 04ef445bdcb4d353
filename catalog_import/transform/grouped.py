"""
Grouped Strategy

Rebuilds products from platforms that spread one product over several
rows sharing a group key (Shopify's "Handle"). Rows of a product need
not be adjacent; products come out in the order their key first appears.
"""

import logging
from typing import Dict, List, Mapping, Sequence, Tuple

from ..models import (
    CanonicalField,
    TransformOptions,
    TransformResult,
    VualProductImage,
    VualProductVariant,
    display_row,
)
from .normalizers import parse_price, parse_stock
from .product_fields import Row, build_product, cell_value, get_field
from .sku import SkuDeduplicator

logger = logging.getLogger(__name__)

# (file row number, row)
NumberedRow = Tuple[int, Row]


def group_rows(rows: Sequence[Row], group_by_column: str) -> Tuple[List[str], Dict[str, List[NumberedRow]]]:
    """
    Bucket rows by their group key.

    Rows with a blank key belong to no bucket.

    Returns:
        Tuple of (keys in first-seen order, key -> numbered rows in file order)
    """
    order: List[str] = []
    buckets: Dict[str, List[NumberedRow]] = {}
    skipped = 0

    for idx, row in enumerate(rows):
        key = cell_value(row, group_by_column)
        if not key:
            skipped += 1
            continue
        if key not in buckets:
            buckets[key] = []
            order.append(key)
        buckets[key].append((display_row(idx), row))

    if skipped:
        logger.debug("Skipped %d rows with blank %s", skipped, group_by_column)

    return order, buckets


def transform_grouped_rows(
    rows: Sequence[Row],
    field_map: Mapping[str, CanonicalField],
    group_by_column: str,
    options: TransformOptions,
    skus: SkuDeduplicator,
) -> TransformResult:
    """
    Transform multi-row exports into products.

    The first row of each group holds the product fields and is the only
    one validated; a bad first row drops the whole group. Every row may add
    an image, and rows with a color, size or SKU (plus the first row) add
    a variant. Variant prices that differ from the product price become
    price overrides.

    Args:
        rows: Data rows in file order
        field_map: Column -> canonical field map
        group_by_column: Column tying rows of one product together
        options: Import-wide defaults
        skus: SKU registry for this import

    Returns:
        TransformResult
    """
    result = TransformResult()
    order, buckets = group_rows(rows, group_by_column)

    for key in order:
        bucket = buckets[key]
        first_row_number, first_row = bucket[0]

        product, error = build_product(first_row, field_map, first_row_number, options)
        if error:
            logger.debug("Row %d (%s): %s", error.row, key, error.message)
            result.errors.append(error)
            continue

        for position, (row_number, row) in enumerate(bucket):
            image_url = get_field(row, field_map, CanonicalField.IMAGE_URL)
            color = get_field(row, field_map, CanonicalField.COLOR) or None
            size = get_field(row, field_map, CanonicalField.SIZE) or None
            raw_sku = get_field(row, field_map, CanonicalField.SKU)

            if image_url and not any(img.url == image_url for img in product.images):
                product.images.append(VualProductImage(url=image_url, color=color))

            # Image-only rows
            if position > 0 and not (color or size or raw_sku):
                continue

            sku, warning = skus.resolve(raw_sku, row_number)
            if warning:
                result.warnings.append(warning)

            variant_price = parse_price(get_field(row, field_map, CanonicalField.PRICE))
            price_override = None
            if variant_price is not None and variant_price != product.price:
                price_override = variant_price

            product.variants.append(VualProductVariant(
                color=color,
                size=size,
                sku=sku,
                stock=parse_stock(get_field(row, field_map, CanonicalField.STOCK)),
                price_override=price_override,
            ))

        if not product.variants:
            product.variants.append(VualProductVariant())

        result.products.append(product)

    return result
