"""Configuration management for BrutNet.

Configuration lives in a single settings.json file in the config directory:
   - rate_table: path to a custom rate table YAML (overrides packaged tables)
   - year: packaged rate table year to use by default
   - default_status: 'non-cadre' or 'cadre'
   - default_output_format: 'text' or 'json'

Config directory resolution:
1. BRUTNET_CONFIG_PATH environment variable (if set)
2. ~/.config/brutnet/ (XDG_CONFIG_HOME fallback)

Rate table resolution (get_configured_rate_table):
1. Explicit path argument (CLI --rates)
2. Explicit year argument (CLI --year)
3. settings.json "rate_table" key
4. settings.json "year" key
5. Packaged table for DEFAULT_YEAR
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from .taxes import (
    DEFAULT_YEAR,
    RateTable,
    load_rate_table,
    load_rate_table_file,
)

logger = logging.getLogger(__name__)

APP_NAME = "brutnet"
SETTINGS_FILENAME = "settings.json"

KNOWN_SETTINGS = ("rate_table", "year", "default_status", "default_output_format")


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. BRUTNET_CONFIG_PATH environment variable
    2. ~/.config/brutnet/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("BRUTNET_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_configured_rate_table(
    path: Optional[str] = None,
    year: Optional[str] = None,
) -> RateTable:
    """Resolve the rate table from arguments, then settings, then defaults.

    Raises:
        RateTableNotFoundError: If the selected path or year has no table
        RateTableError: If the selected file fails validation
    """
    if path:
        return load_rate_table_file(path)
    if year:
        return load_rate_table(str(year))

    settings = load_settings()
    if settings.get("rate_table"):
        logger.debug(f"Using rate table from settings: {settings['rate_table']}")
        return load_rate_table_file(settings["rate_table"])
    if settings.get("year"):
        return load_rate_table(str(settings["year"]))

    return load_rate_table(DEFAULT_YEAR)
