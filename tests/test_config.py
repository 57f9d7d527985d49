"""Tests for controller_helper configuration and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from controller_helper.config import (
    ControllerHelperConfig,
    configure_logging,
    get_config,
    reset_config,
    set_config,
)

ENV_VARS = [
    "CONTROLLER_HELPER_DEFAULT_ERROR_CODE",
    "CONTROLLER_HELPER_INCLUDE_ASYNC",
    "CONTROLLER_HELPER_LEGACY_SUCCESS",
    "CONTROLLER_HELPER_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove controller_helper variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield monkeypatch
    reset_config()


class TestControllerHelperConfig:
    """Test the configuration model."""

    def test_defaults(self):
        config = ControllerHelperConfig()

        assert config.default_error_code == 400
        assert config.include_async_actions is True
        assert config.legacy_string_success is False
        assert config.log_level == "info"

    def test_field_names_and_aliases(self):
        by_name = ControllerHelperConfig(default_error_code=422)
        by_alias = ControllerHelperConfig(CONTROLLER_HELPER_DEFAULT_ERROR_CODE=422)

        assert by_name.default_error_code == by_alias.default_error_code == 422

    def test_rejects_invalid_status_code(self):
        with pytest.raises(ValidationError):
            ControllerHelperConfig(default_error_code=700)

    def test_from_env(self, clean_env):
        clean_env.setenv("CONTROLLER_HELPER_DEFAULT_ERROR_CODE", "409")
        clean_env.setenv("CONTROLLER_HELPER_INCLUDE_ASYNC", "false")
        clean_env.setenv("CONTROLLER_HELPER_LEGACY_SUCCESS", "yes")
        clean_env.setenv("CONTROLLER_HELPER_LOG_LEVEL", "debug")

        config = ControllerHelperConfig.from_env()

        assert config.default_error_code == 409
        assert config.include_async_actions is False
        assert config.legacy_string_success is True
        assert config.log_level == "debug"

    def test_from_env_defaults(self, clean_env):
        assert ControllerHelperConfig.from_env() == ControllerHelperConfig()


class TestActiveConfig:
    """Test get_config/set_config/reset_config."""

    def test_get_config_is_cached(self, clean_env):
        assert get_config() is get_config()

    def test_set_config(self, clean_env):
        config = ControllerHelperConfig(default_error_code=418)

        set_config(config)

        assert get_config() is config

    def test_reset_config_reloads_environment(self, clean_env):
        set_config(ControllerHelperConfig(default_error_code=418))
        clean_env.setenv("CONTROLLER_HELPER_DEFAULT_ERROR_CODE", "503")

        reset_config()

        assert get_config().default_error_code == 503


class TestConfigureLogging:
    """Test logging level setup."""

    def teardown_method(self):
        logging.getLogger("controller_helper").setLevel(logging.NOTSET)

    def test_explicit_level(self):
        assert configure_logging("debug") == logging.DEBUG
        assert logging.getLogger("controller_helper").level == logging.DEBUG

    def test_level_from_config(self, clean_env):
        set_config(ControllerHelperConfig(log_level="warning"))

        assert configure_logging() == logging.WARNING
        assert logging.getLogger("controller_helper.actions").getEffectiveLevel() == (
            logging.WARNING
        )

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("chatty")
