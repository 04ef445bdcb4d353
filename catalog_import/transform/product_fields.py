"""
Row field access and product-level validation shared by both strategies.
"""

from typing import Any, Mapping, Optional, Tuple

from ..models import (
    CanonicalField,
    TransformError,
    TransformOptions,
    VualProduct,
)
from .normalizers import parse_price, parse_status, split_tags, strip_html

Row = Mapping[str, Any]

MSG_NAME_REQUIRED = '商品名が必須です'
MSG_INVALID_PRICE = '価格が不正: {value}'


def cell_value(row: Row, column: str) -> str:
    """Trimmed string value of a cell; missing or None cells read as ''."""
    value = row.get(column)
    if value is None:
        return ''
    return str(value).strip()


def get_field(row: Row, field_map: Mapping[str, Any], field: CanonicalField) -> str:
    """
    Read a canonical field from a row.

    The first column mapped to the field is used; if no column is mapped
    the field reads as ''.
    """
    for column, mapped in field_map.items():
        if mapped == field:
            return cell_value(row, column)
    return ''


def build_product(
    row: Row,
    field_map: Mapping[str, Any],
    row_number: int,
    options: TransformOptions,
) -> Tuple[Optional[VualProduct], Optional[TransformError]]:
    """
    Build a product (without images or variants) from its authoritative row.

    Args:
        row: Row holding the product-level fields
        field_map: Column -> canonical field map
        row_number: File row number used for errors
        options: Import-wide defaults

    Returns:
        Tuple of (product, None) or (None, error) when name or price is invalid
    """
    name = get_field(row, field_map, CanonicalField.NAME)
    if not name:
        return None, TransformError(row=row_number, field=CanonicalField.NAME.value,
                                    message=MSG_NAME_REQUIRED)

    price_str = get_field(row, field_map, CanonicalField.PRICE)
    price = parse_price(price_str)
    if price is None:
        return None, TransformError(row=row_number, field=CanonicalField.PRICE.value,
                                    message=MSG_INVALID_PRICE.format(value=price_str))

    description = get_field(row, field_map, CanonicalField.DESCRIPTION)
    tags = split_tags(get_field(row, field_map, CanonicalField.TAGS))

    product = VualProduct(
        name=name,
        name_en=get_field(row, field_map, CanonicalField.NAME_EN) or None,
        description=strip_html(description) if description else None,
        category=get_field(row, field_map, CanonicalField.CATEGORY) or options.default_category,
        price=price,
        currency=options.default_currency,
        brand_name=get_field(row, field_map, CanonicalField.BRAND) or None,
        tags=tags or None,
        status=parse_status(get_field(row, field_map, CanonicalField.STATUS)),
    )
    return product, None
