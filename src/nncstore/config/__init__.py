"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .inputs import DECK_ENV_VAR, GRID_ENV_VAR, InputConfig, get_input_config
from .logging import LOG_LEVEL_ENV_VAR, configure_logging, resolve_log_level

__all__ = [
    "DECK_ENV_VAR",
    "GRID_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "ConfigurationError",
    "InputConfig",
    "MissingConfigurationError",
    "configure_logging",
    "get_input_config",
    "optional_env_var",
    "require_env_vars",
    "resolve_log_level",
]
