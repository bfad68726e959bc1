"""Tests for environment-driven configuration."""

import pytest

from tictactoe.config import AppConfig, load_config


def test_defaults_when_environment_empty():
    assert load_config({}) == AppConfig()


def test_values_read_from_environment():
    config = load_config(
        {
            "TICTACTOE_APP_NAME": "Noughts",
            "TICTACTOE_VERSION": "2.0.1",
            "TICTACTOE_ENV": "production",
            "TICTACTOE_AI_DELAY": "0",
            "TICTACTOE_PORT": "9000",
            "TICTACTOE_LOG_LEVEL": "debug",
        }
    )
    assert config.app_name == "Noughts"
    assert config.version == "2.0.1"
    assert config.environment == "production"
    assert config.ai_delay == 0.0
    assert config.port == 9000
    assert config.log_level == "DEBUG"


def test_blank_title_falls_back_to_default():
    assert load_config({"TICTACTOE_APP_NAME": ""}).app_name == "Tic Tac Toe"


def test_bad_numbers_fail_fast():
    with pytest.raises(ValueError):
        load_config({"TICTACTOE_AI_DELAY": "-1"})
    with pytest.raises(ValueError):
        load_config({"TICTACTOE_PORT": "eighty"})


def test_blank_values_fall_back_to_defaults():
    config = load_config(
        {
            "TICTACTOE_HOST": "",
            "TICTACTOE_PORT": "",
            "TICTACTOE_AI_DELAY": "",
            "TICTACTOE_LOG_LEVEL": "",
        }
    )
    assert config == AppConfig()
