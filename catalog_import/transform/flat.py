"""
Flat Strategy

One row is one product with exactly one variant (BASE, STORES.jp and
manually mapped files).
"""

import logging
from typing import Mapping, Sequence

from ..models import (
    CanonicalField,
    TransformOptions,
    TransformResult,
    VualProductImage,
    VualProductVariant,
    display_row,
)
from .normalizers import parse_stock, split_image_urls
from .product_fields import Row, build_product, get_field
from .sku import SkuDeduplicator

logger = logging.getLogger(__name__)


def transform_flat_rows(
    rows: Sequence[Row],
    field_map: Mapping[str, CanonicalField],
    options: TransformOptions,
    skus: SkuDeduplicator,
) -> TransformResult:
    """
    Transform one-row-per-product exports.

    Each row is validated on its own; an invalid row only adds an error.
    The image cell may list several URLs separated by ',' or ';'.
    """
    result = TransformResult()

    for idx, row in enumerate(rows):
        row_number = display_row(idx)

        product, error = build_product(row, field_map, row_number, options)
        if error:
            logger.debug("Row %d: %s", row_number, error.message)
            result.errors.append(error)
            continue

        color = get_field(row, field_map, CanonicalField.COLOR) or None
        size = get_field(row, field_map, CanonicalField.SIZE) or None

        sku, warning = skus.resolve(get_field(row, field_map, CanonicalField.SKU), row_number)
        if warning:
            result.warnings.append(warning)

        for url in split_image_urls(get_field(row, field_map, CanonicalField.IMAGE_URL)):
            product.images.append(VualProductImage(url=url, color=color))

        product.variants.append(VualProductVariant(
            color=color,
            size=size,
            sku=sku,
            stock=parse_stock(get_field(row, field_map, CanonicalField.STOCK)),
        ))

        result.products.append(product)

    return result
