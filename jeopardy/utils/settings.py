"""
Settings loading and logging setup for the Jeopardy board.

Settings live in a JSON file (``config/settings.json`` by default) and are
merged over the built-in defaults, so a partial file only needs the keys it
changes.
"""

import copy
import json
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from ..constants import DEFAULT_SETTINGS
from ..errors import ConfigError


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file and merge them over the defaults.

    A missing file is not an error: the defaults are used and a warning is
    logged.

    Args:
        config_path: Path to the settings file

    Returns:
        Complete settings dictionary

    Raises:
        ConfigError: If the file is not valid JSON or holds invalid values
    """
    logger = logging.getLogger(__name__)

    if not config_path or not Path(config_path).exists():
        if config_path:
            logger.warning(f"Settings file not found: {config_path}. Using defaults")
        settings = copy.deepcopy(DEFAULT_SETTINGS)
    else:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Settings in {config_path} must be a JSON object")

        settings = _deep_merge(DEFAULT_SETTINGS, raw)
        logger.debug(f"Loaded settings from {config_path}")

    validate_settings(settings)
    return settings


def validate_settings(settings: Dict[str, Any]) -> None:
    """
    Reject settings the board builder cannot work with.

    Raises:
        ConfigError: Describing every invalid value found
    """
    errors = []
    board = settings.get('board', {})
    api = settings.get('api', {})

    for key in ('category_count', 'question_count', 'batch_size'):
        value = board.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            errors.append(f"board.{key} must be a positive integer, got {value!r}")

    offset_min = board.get('offset_min')
    offset_max = board.get('offset_max')
    if not isinstance(offset_min, int) or not isinstance(offset_max, int) or offset_min < 0:
        errors.append(f"board offsets must be non-negative integers, got {offset_min!r}..{offset_max!r}")
    elif offset_min >= offset_max:
        errors.append(f"board.offset_min ({offset_min}) must be below board.offset_max ({offset_max})")

    if not api.get('base_url'):
        errors.append("api.base_url must be set")

    rpm = api.get('requests_per_minute')
    if not isinstance(rpm, (int, float)) or rpm <= 0:
        errors.append(f"api.requests_per_minute must be positive, got {rpm!r}")

    attempts = api.get('retry', {}).get('attempts')
    if not isinstance(attempts, int) or attempts < 1:
        errors.append(f"api.retry.attempts must be at least 1, got {attempts!r}")

    if errors:
        raise ConfigError("; ".join(errors))


def setup_logging(settings: Dict[str, Any]) -> None:
    """Set up logging for both file and console output."""
    log_config = settings['logging']
    log_file = log_config['file']
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()

    # Clear any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, str(log_config['level']).upper(), logging.INFO)
    root_logger.setLevel(log_level)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=log_config.get('max_size', 10485760),
        backupCount=log_config.get('backup_count', 5),
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    file_handler.setFormatter(file_formatter)
    console_handler.setFormatter(console_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.debug(f"Logging initialized - Level: {log_config['level']}, file: {log_file}")
