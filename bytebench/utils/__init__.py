"""Bytebench utilities - shared helper functions."""

from bytebench.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    env_is_set,
    get_env,
)
from bytebench.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "env_is_set",
    "get_env",
]
