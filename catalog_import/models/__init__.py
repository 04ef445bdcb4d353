"""
Data models for the catalog import pipeline.

This module contains pure data classes with no business logic.
"""

from .fields import REQUIRED_FIELDS, CanonicalField, GroupingMode, PlatformId
from .product import (
    STATUS_DRAFT,
    STATUS_PUBLISHED,
    VualProduct,
    VualProductImage,
    VualProductVariant,
)
from .result import (
    HEADER_ROW_OFFSET,
    TransformError,
    TransformIssue,
    TransformOptions,
    TransformResult,
    TransformWarning,
    display_row,
)

__all__ = [
    'CanonicalField',
    'GroupingMode',
    'PlatformId',
    'REQUIRED_FIELDS',
    'STATUS_DRAFT',
    'STATUS_PUBLISHED',
    'VualProduct',
    'VualProductImage',
    'VualProductVariant',
    'HEADER_ROW_OFFSET',
    'TransformError',
    'TransformIssue',
    'TransformOptions',
    'TransformResult',
    'TransformWarning',
    'display_row',
]
