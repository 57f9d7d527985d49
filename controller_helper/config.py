"""Configuration for controller_helper.

This module provides the configuration model shared by the response helpers
and the action classifier, plus the logging setup for the package.
"""

import logging
import os
import threading
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}

_config: Optional["ControllerHelperConfig"] = None
_config_lock = threading.Lock()


class ControllerHelperConfig(BaseModel):
    """Configuration model for controller_helper.

    Attributes:
        default_error_code: Status code used by ``json_error`` when none is given
        include_async_actions: Whether async methods count as actions by default
        legacy_string_success: Emit ``"True"``/``"False"`` strings in envelopes
        log_level: Logging level for the ``controller_helper`` logger tree
    """

    model_config = ConfigDict(populate_by_name=True)

    default_error_code: int = Field(
        default=400,
        ge=100,
        le=599,
        validation_alias="CONTROLLER_HELPER_DEFAULT_ERROR_CODE",
    )
    include_async_actions: bool = Field(
        default=True, validation_alias="CONTROLLER_HELPER_INCLUDE_ASYNC"
    )
    legacy_string_success: bool = Field(
        default=False, validation_alias="CONTROLLER_HELPER_LEGACY_SUCCESS"
    )
    log_level: str = Field(
        default="info", validation_alias="CONTROLLER_HELPER_LOG_LEVEL"
    )

    @classmethod
    def from_env(cls) -> "ControllerHelperConfig":
        """Build a configuration from ``CONTROLLER_HELPER_*`` environment variables.

        Unset variables keep their defaults.
        """
        values: Dict[str, Any] = {}

        error_code = os.getenv("CONTROLLER_HELPER_DEFAULT_ERROR_CODE")
        if error_code:
            values["default_error_code"] = int(error_code)

        include_async = os.getenv("CONTROLLER_HELPER_INCLUDE_ASYNC")
        if include_async is not None:
            values["include_async_actions"] = include_async.lower() in _TRUE_VALUES

        legacy = os.getenv("CONTROLLER_HELPER_LEGACY_SUCCESS")
        if legacy is not None:
            values["legacy_string_success"] = legacy.lower() in _TRUE_VALUES

        log_level = os.getenv("CONTROLLER_HELPER_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level

        return cls(**values)


def get_config() -> ControllerHelperConfig:
    """Get the active configuration, loading it from the environment on first use."""
    global _config
    with _config_lock:
        if _config is None:
            _config = ControllerHelperConfig.from_env()
        return _config


def set_config(config: ControllerHelperConfig) -> None:
    """Replace the active configuration."""
    global _config
    with _config_lock:
        _config = config
    logger.debug(f"controller_helper configuration replaced: {config.model_dump()}")


def reset_config() -> None:
    """Drop the active configuration so the next access reloads it."""
    global _config
    with _config_lock:
        _config = None


def configure_logging(level: Optional[str] = None) -> int:
    """Set the level of the ``controller_helper`` logger tree.

    Args:
        level: Level name such as ``"debug"``; defaults to the configured level

    Returns:
        The numeric level that was applied

    Raises:
        ValueError: If the level name is unknown
    """
    level_name = (level or get_config().log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    logging.getLogger("controller_helper").setLevel(numeric_level)
    return numeric_level


__all__ = [
    "ControllerHelperConfig",
    "get_config",
    "set_config",
    "reset_config",
    "configure_logging",
]
