"""Configuration management for presentation settings."""

import logging
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .models import DEFAULT_SETTINGS, Settings


def load_settings(filepath: Optional[str] = None) -> Settings:
    """
    Load presentation settings from a YAML file.

    A missing, empty or malformed file never stops the calculator from
    starting; the defaults are used instead.

    Args:
        filepath: Path to the settings YAML file, or None for the defaults

    Returns:
        The validated settings
    """
    if filepath is None:
        return DEFAULT_SETTINGS

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logging.info(f"Settings file '{filepath}' not found. Using defaults.")
        return DEFAULT_SETTINGS
    except yaml.YAMLError as e:
        logging.warning(f"Settings file '{filepath}' is not valid YAML. Using defaults. {e}")
        return DEFAULT_SETTINGS

    if not isinstance(data, dict):
        logging.warning(f"Settings file '{filepath}' is empty or malformed. Using defaults.")
        return DEFAULT_SETTINGS

    return settings_from_dict(data, source=filepath)


def settings_from_dict(data: Dict[str, Any], source: str = "<dict>") -> Settings:
    """
    Validate a settings mapping, falling back to defaults when it is invalid.

    Args:
        data: Raw settings mapping
        source: Where the mapping came from, for log messages

    Returns:
        The validated settings
    """
    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        logging.warning(f"Invalid settings in '{source}'. Using defaults. {e}")
        return DEFAULT_SETTINGS

    logging.info(f"Loaded settings from '{source}'.")
    return settings
