"""
Platform detection and column mapping.

Modules:
    config - PlatformConfig registry loaded from config/platforms.yaml
    detector - detect_platform from a CSV header row
    field_mapper - default and manual column -> field maps
"""

from .config import (
    PlatformConfig,
    PlatformConfigError,
    get_group_by_column,
    get_platform_config,
    get_platform_configs,
)
from .detector import MIN_MATCHING_HEADERS, detect_platform
from .field_mapper import (
    FieldMap,
    FieldMapError,
    get_default_field_map,
    missing_required_fields,
    normalize_field_map,
)

__all__ = [
    'PlatformConfig',
    'PlatformConfigError',
    'get_group_by_column',
    'get_platform_config',
    'get_platform_configs',
    'MIN_MATCHING_HEADERS',
    'detect_platform',
    'FieldMap',
    'FieldMapError',
    'get_default_field_map',
    'missing_required_fields',
    'normalize_field_map',
]
