import json
import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler

import pytest

from jeopardy.constants import DEFAULT_SETTINGS
from jeopardy.errors import ConfigError
from jeopardy.utils.settings import load_settings, setup_logging, validate_settings


def test_missing_file_falls_back_to_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "nope.json"))
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_partial_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({'board': {'category_count': 4}, 'api': {'retry': {'attempts': 5}}}))

    settings = load_settings(str(path))

    assert settings['board']['category_count'] == 4
    assert settings['board']['question_count'] == 5
    assert settings['api']['retry']['attempts'] == 5
    assert settings['api']['retry']['max_wait'] == DEFAULT_SETTINGS['api']['retry']['max_wait']
    assert DEFAULT_SETTINGS['board']['category_count'] == 6


def test_invalid_json_raises_config_error(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError):
        load_settings(str(path))


def test_shipped_settings_file_is_valid():
    settings = load_settings(str(Path(__file__).resolve().parent.parent / "config" / "settings.json"))
    assert settings['board']['category_count'] == 6


@pytest.mark.parametrize("section, key, value", [
    ('board', 'category_count', 0),
    ('board', 'question_count', -2),
    ('board', 'batch_size', 'many'),
    ('board', 'offset_min', 500),
    ('api', 'base_url', ''),
    ('api', 'requests_per_minute', 0),
])
def test_validate_settings_rejects_bad_values(section, key, value):
    settings = load_settings(None)
    settings[section][key] = value

    with pytest.raises(ConfigError):
        validate_settings(settings)


def test_setup_logging_installs_file_and_console_handlers(tmp_path):
    settings = load_settings(None)
    settings['logging']['file'] = str(tmp_path / "logs" / "game.log")
    settings['logging']['level'] = 'DEBUG'
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level

    try:
        setup_logging(settings)
        handler_types = [type(handler) for handler in root_logger.handlers]
        assert RotatingFileHandler in handler_types
        assert logging.StreamHandler in handler_types
        assert root_logger.level == logging.DEBUG
        assert (tmp_path / "logs").is_dir()
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)
