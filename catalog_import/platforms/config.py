"""
Platform Configuration

Immutable descriptions of the supported export formats, built from
config/platforms.yaml. Header strings and field names are reproduced
exactly as the platforms export them.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..common.config_loader import load_platform_definitions
from ..models import CanonicalField, GroupingMode, PlatformId

logger = logging.getLogger(__name__)


class PlatformConfigError(ValueError):
    """platforms.yaml contains an invalid definition."""


@dataclass(frozen=True)
class PlatformConfig:
    """One supported export format."""
    name: PlatformId
    display_name: str
    header_patterns: Tuple[str, ...]
    grouping: GroupingMode
    default_field_map: Mapping[str, CanonicalField]
    group_by_column: Optional[str] = None

    @property
    def is_multi_row(self) -> bool:
        """True when one product spans several rows tied by a group key."""
        return self.grouping == GroupingMode.MULTI_ROW and bool(self.group_by_column)


def _build_config(raw: Dict[str, Any]) -> PlatformConfig:
    name = raw.get('name', '?')
    try:
        platform = PlatformId(name)
        grouping = GroupingMode(raw.get('grouping', GroupingMode.NONE.value))
        field_map = {
            str(header).strip(): CanonicalField(field)
            for header, field in (raw.get('default_field_map') or {}).items()
        }
    except ValueError as e:
        raise PlatformConfigError(f"Invalid platform definition {name!r}: {e}") from e

    if platform == PlatformId.UNKNOWN:
        raise PlatformConfigError("'unknown' cannot be defined as a platform")

    patterns = tuple(str(p).strip() for p in raw.get('header_patterns') or [])
    if not patterns:
        raise PlatformConfigError(f"Platform {name!r} has no header_patterns")

    group_by = raw.get('group_by_column')
    return PlatformConfig(
        name=platform,
        display_name=str(raw.get('display_name') or name),
        header_patterns=patterns,
        grouping=grouping,
        default_field_map=MappingProxyType(field_map),
        group_by_column=str(group_by).strip() if group_by else None,
    )


@lru_cache(maxsize=1)
def get_platform_configs() -> Tuple[PlatformConfig, ...]:
    """
    Load all platform configs in detection order.

    Loaded once per process; the result is immutable.

    Returns:
        Tuple of PlatformConfig

    Raises:
        PlatformConfigError: If a definition is malformed or duplicated
    """
    configs = tuple(_build_config(raw) for raw in load_platform_definitions())

    names = [c.name for c in configs]
    duplicates = {n for n in names if names.count(n) > 1}
    if duplicates:
        raise PlatformConfigError(f"Duplicate platform definitions: {sorted(duplicates)}")

    logger.debug("Loaded %d platform configs: %s", len(configs), ', '.join(names))
    return configs


def get_platform_config(platform: Union[PlatformId, str]) -> Optional[PlatformConfig]:
    """
    Look up the config for a platform id.

    Args:
        platform: Platform id (enum member or its string value)

    Returns:
        PlatformConfig, or None for 'unknown' and unrecognised ids
    """
    for config in get_platform_configs():
        if config.name == platform:
            return config
    return None


def get_group_by_column(platform: Union[PlatformId, str]) -> Optional[str]:
    """Get the group-by column for multi-row platforms (e.g. Shopify's 'Handle')."""
    config = get_platform_config(platform)
    return config.group_by_column if config else None
