import logging

import pytest

from comment_normalizer.utils.logging_utils import DEFAULT_LOGGING_CONFIG_PATH, setup_logging


@pytest.fixture
def mock_dict_config(mocker):
    return mocker.patch("comment_normalizer.utils.logging_utils.logging.config.dictConfig")


def test_setup_logging_uses_shipped_config(mock_dict_config):
    setup_logging()

    mock_dict_config.assert_called_once()
    config = mock_dict_config.call_args.args[0]
    assert config["handlers"]["console"]["formatter"] == "standard"
    assert config["loggers"]["comment_normalizer"]["level"] == "INFO"


def test_setup_logging_level_override(mock_dict_config):
    setup_logging(log_level="DEBUG")

    config = mock_dict_config.call_args.args[0]
    assert config["handlers"]["console"]["level"] == "DEBUG"
    assert config["loggers"]["comment_normalizer"]["level"] == "DEBUG"


def test_setup_logging_accepts_lowercase_level(mock_dict_config):
    setup_logging(log_level="debug")

    config = mock_dict_config.call_args.args[0]
    assert config["handlers"]["console"]["level"] == "DEBUG"
    assert config["loggers"]["comment_normalizer"]["level"] == "DEBUG"


def test_setup_logging_json_format(mock_dict_config):
    setup_logging(json_format=True)

    config = mock_dict_config.call_args.args[0]
    assert config["handlers"]["console"]["formatter"] == "json"
    assert config["formatters"]["json"]["()"] == "pythonjsonlogger.json.JsonFormatter"


def test_setup_logging_missing_file(tmp_path, mocker, mock_dict_config):
    basic_config = mocker.patch("comment_normalizer.utils.logging_utils.logging.basicConfig")
    warning = mocker.patch("comment_normalizer.utils.logging_utils.logging.warning")

    setup_logging(config_path=tmp_path / "missing.yaml", log_level="warning")

    mock_dict_config.assert_not_called()
    basic_config.assert_called_once_with(level="WARNING")
    warning.assert_called_once()


def test_setup_logging_broken_file_falls_back(tmp_path, mocker):
    path = tmp_path / "broken.yaml"
    path.write_text("version: 1\nhandlers:\n  console:\n    class: no.such.Handler\n", encoding="utf-8")
    basic_config = mocker.patch("comment_normalizer.utils.logging_utils.logging.basicConfig")
    error = mocker.patch("comment_normalizer.utils.logging_utils.logging.error")

    setup_logging(config_path=path)

    basic_config.assert_called_once_with(level=logging.INFO)
    error.assert_called_once()


def test_default_config_path_exists():
    assert DEFAULT_LOGGING_CONFIG_PATH.exists()
