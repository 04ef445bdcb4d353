"""
Value Normalizers

Convert raw CSV cell strings into typed product values.
Price is strict (invalid means the product is rejected); stock and
status are best-effort and always produce a value.
"""

import math
import re
from typing import List, Optional

from ..common.text_utils import split_list, strip_html
from ..models import STATUS_DRAFT, STATUS_PUBLISHED

# Currency symbols (incl. full-width yen), thousands separators, whitespace
_PRICE_NOISE = re.compile(r'[¥￥$€£,\s]')
_STOCK_NOISE = re.compile(r'[,\s]')
_LEADING_INT = re.compile(r'[+-]?[0-9]+')
# Plain ASCII decimal, optional exponent (no "1_000", no full-width digits)
_PRICE_NUMBER = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?')

# Shopify "Published"
_TRUE_TOKENS = frozenset({'true', '1'})
# BASE "公開状態" / STORES.jp "公開/非公開"
_PUBLISHED_TOKENS = frozenset({'公開', 'published'})
_PUBLISHED_MARKER = '公開'


def parse_price(value: str) -> Optional[float]:
    """
    Parse a price cell.

    Examples:
        >>> parse_price("¥2,500")
        2500.0
        >>> parse_price("-1") is None
        True

    Args:
        value: Raw cell value

    Returns:
        Non-negative price, or None if blank, not a number or negative
    """
    if not value:
        return None

    cleaned = _PRICE_NOISE.sub('', value)
    if not _PRICE_NUMBER.fullmatch(cleaned):
        return None

    number = float(cleaned)
    if math.isinf(number) or number < 0:
        return None
    return number or 0.0  # normalizes -0.0


def parse_stock(value: str) -> int:
    """
    Parse a stock quantity cell.

    Leading digits are used (e.g. "12 pcs" -> 12). Blank, invalid or
    negative input gives 0.
    """
    if not value:
        return 0

    match = _LEADING_INT.match(_STOCK_NOISE.sub('', value))
    if not match:
        return 0
    return max(int(match.group()), 0)


def parse_status(value: str) -> str:
    """
    Parse a publish status cell from any supported platform.

    Args:
        value: Raw cell value ("TRUE", "1", "公開", ...)

    Returns:
        "published" or "draft"
    """
    v = (value or '').strip().lower()
    if v in _TRUE_TOKENS or v in _PUBLISHED_TOKENS:
        return STATUS_PUBLISHED
    if _PUBLISHED_MARKER in v:
        return STATUS_PUBLISHED
    return STATUS_DRAFT


def split_tags(value: str) -> List[str]:
    """Split a comma-separated tag cell."""
    return split_list(value, r',')


def split_image_urls(value: str) -> List[str]:
    """Split an image cell holding several URLs separated by ',' or ';'."""
    return split_list(value, r'[,;]')


__all__ = [
    'parse_price',
    'parse_stock',
    'parse_status',
    'split_tags',
    'split_image_urls',
    'strip_html',
]
