"""
Configuration Loader

Loads the YAML storefront configuration (sheet URL, image location,
page texts) and turns it into a StorefrontConfig.
"""

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..models import StorefrontConfig, build_placeholder_image

DEFAULT_CONFIG_FILE = 'storefront.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
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


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file from the config directory.

    Args:
        filename: Name of the config file (e.g., 'storefront.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    return _read_yaml(_get_config_dir() / filename)


def build_storefront_config(settings: Dict[str, Any]) -> StorefrontConfig:
    """
    Build a StorefrontConfig from a settings dictionary.

    A "placeholder_caption" key renders the default placeholder image with
    another caption. None values are skipped so callers can pass unset CLI
    options straight through.

    Raises:
        ValueError: If a key is not a known setting
    """
    known = {f.name for f in fields(StorefrontConfig)}
    values: Dict[str, Any] = {}

    for key, value in settings.items():
        if value is None:
            continue
        if key == 'placeholder_caption':
            values.setdefault('placeholder_image', build_placeholder_image(str(value)))
            continue
        if key not in known:
            raise ValueError(f"Unknown storefront setting: {key}")
        values[key] = value

    if 'request_timeout' in values:
        values['request_timeout'] = float(values['request_timeout'])

    return StorefrontConfig(**values)


def load_storefront_config(path: Optional[str | Path] = None, **overrides) -> StorefrontConfig:
    """
    Load storefront settings.

    Args:
        path: Explicit YAML file (if None, loads config/storefront.yaml)
        **overrides: Settings that replace file values (None values ignored)

    Returns:
        StorefrontConfig

    Example:
        config = load_storefront_config(sheet_csv_url="https://.../pub?output=csv")
    """
    if path is None:
        settings = load_config(DEFAULT_CONFIG_FILE)
    else:
        settings = _read_yaml(Path(path))

    settings = dict(settings.get('storefront', settings))
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return build_storefront_config(settings)
