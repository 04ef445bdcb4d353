"""
Configuration Loader

Loads YAML configuration files for platform export formats,
import defaults, and operator-supplied field mappings.
"""

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Shipped inside the package
    module_dir = Path(__file__).parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'platforms.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_platform_definitions() -> List[Dict[str, Any]]:
    """
    Load raw platform definitions, in detection order.

    Returns:
        List of platform dictionaries

    Example:
        [
            {
                'name': 'shopify',
                'display_name': 'Shopify',
                'header_patterns': ['Handle', 'Title', ...],
                'grouping': 'multi_row',
                'group_by_column': 'Handle',
                'default_field_map': {'Title': 'name', ...},
            },
            ...
        ]
    """
    config = load_config('platforms.yaml')
    return config.get('platforms', [])


def load_import_settings() -> Dict[str, str]:
    """
    Load default import options.

    Returns:
        Dictionary with 'default_category' and 'default_currency'
    """
    config = load_config('import_settings.yaml')
    return {
        'default_category': str(config.get('default_category') or ''),
        'default_currency': str(config.get('default_currency') or 'JPY'),
    }


def load_field_mapping(path: Union[str, Path]) -> Dict[str, str]:
    """
    Load a manual column mapping from a YAML file.

    The file is either a plain ``header: field`` mapping or has the
    mapping under a top-level ``fields`` key.

    Args:
        path: Path to the mapping file

    Returns:
        Dictionary mapping CSV header to field name (unvalidated)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file does not contain a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Mapping file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if isinstance(data, dict) and isinstance(data.get('fields'), dict):
        data = data['fields']

    if not isinstance(data, dict):
        raise ValueError(f"Mapping file must contain a header -> field mapping: {path}")

    return {str(header): '' if field is None else str(field) for header, field in data.items()}
