"""
Row Transformer

Entry point turning parsed CSV rows into normalized products. The
strategy is a property of the platform: multi-row platforms with a
group-by column are grouped, everything else is flat.
"""

import logging
from typing import Iterable, Mapping, Optional, Union

from ..models import CanonicalField, PlatformId, TransformOptions, TransformResult
from ..platforms.config import get_platform_config
from .flat import transform_flat_rows
from .grouped import transform_grouped_rows
from .product_fields import Row
from .sku import SkuDeduplicator

logger = logging.getLogger(__name__)


def transform_csv_to_products(
    rows: Iterable[Row],
    field_map: Mapping[str, Union[CanonicalField, str]],
    platform: Union[PlatformId, str],
    options: Optional[TransformOptions] = None,
) -> TransformResult:
    """
    Transform CSV rows into products.

    Detection and mapping are not done here; call detect_platform and
    get_default_field_map (or supply a manual map) first. Bad rows never
    raise: they are reported in result.errors, and renamed duplicate SKUs
    in result.warnings.

    Args:
        rows: Header-keyed rows in file order
        field_map: Column -> canonical field map
        platform: Platform the rows were exported from
        options: Default category and currency

    Returns:
        TransformResult with products, errors and warnings
    """
    options = options or TransformOptions()
    rows = list(rows)
    skus = SkuDeduplicator()

    config = get_platform_config(platform)
    if config is not None and config.is_multi_row:
        logger.debug("Grouping %d rows by %r", len(rows), config.group_by_column)
        result = transform_grouped_rows(rows, field_map, config.group_by_column, options, skus)
    else:
        result = transform_flat_rows(rows, field_map, options, skus)

    logger.info(
        "Transformed %d rows: %d products, %d variants, %d errors, %d warnings",
        len(rows), len(result.products), result.variant_count,
        len(result.errors), len(result.warnings),
    )
    return result
