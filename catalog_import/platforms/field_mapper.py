"""
Field Mapper

Builds the column -> canonical field map used by the transformer,
either from a platform's known export layout or from a mapping an
operator supplied.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Union

from ..models import REQUIRED_FIELDS, CanonicalField, PlatformId
from .config import get_platform_config

logger = logging.getLogger(__name__)

FieldMap = Dict[str, CanonicalField]


class FieldMapError(ValueError):
    """A manual mapping names a field that does not exist."""


def get_default_field_map(platform: Union[PlatformId, str], headers: Iterable[str]) -> FieldMap:
    """
    Get the default field mapping for a detected platform.

    Only headers present in the file and known to the platform's export
    layout are mapped; any other column is left unmapped. An unknown
    platform yields an empty map, so a mapping has to be supplied by hand.

    Args:
        platform: Detected platform id
        headers: Header row of the CSV

    Returns:
        Dictionary mapping CSV header to CanonicalField
    """
    config = get_platform_config(platform)
    if config is None:
        logger.info("No default mapping for platform %s", platform)
        return {}

    headers = list(headers)
    result: FieldMap = {}
    for header in headers:
        if header is None:
            continue
        trimmed = header.strip()
        field = config.default_field_map.get(trimmed)
        if field is not None:
            result[trimmed] = field

    logger.debug("Mapped %d of %d columns for %s", len(result), len(headers), config.name)
    return result


def normalize_field_map(mapping: Mapping[str, Union[CanonicalField, str, None]]) -> FieldMap:
    """
    Convert an operator-supplied mapping into a FieldMap.

    Columns mapped to '_skip' or left blank are dropped.

    Args:
        mapping: CSV header -> field name (e.g. {'商品名': 'name'})

    Returns:
        Dictionary mapping trimmed CSV header to CanonicalField

    Raises:
        FieldMapError: If a field name is not a canonical field
    """
    result: FieldMap = {}
    for header, value in mapping.items():
        if value is None or str(value).strip() == '':
            continue
        try:
            field = CanonicalField(str(value).strip())
        except ValueError:
            valid = ', '.join(f.value for f in CanonicalField)
            raise FieldMapError(f"Unknown field {value!r} for column {header!r}. Valid: {valid}") from None
        if field == CanonicalField.UNMAPPED:
            continue
        result[str(header).strip()] = field
    return result


def missing_required_fields(field_map: Mapping[str, CanonicalField]) -> List[CanonicalField]:
    """
    List required fields that no column is mapped to.

    Args:
        field_map: Column mapping to check

    Returns:
        Missing fields in order (name, price); empty if the map is usable
    """
    mapped = set(field_map.values())
    return [f for f in REQUIRED_FIELDS if f not in mapped]
