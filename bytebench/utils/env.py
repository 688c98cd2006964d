"""Environment variable helpers with type coercion.

Usage:
    from bytebench.utils.env import env_is_set, get_env

    threads = get_env("BYTEBENCH_THREADS", as_type=int)
    level = get_env("BYTEBENCH_LOG_LEVEL", default="WARNING")
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

_FALSE_VALUES = ("false", "0", "", "no", "off")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a raw string value to ``as_type``.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.strip().lower() not in _FALSE_VALUES
        if as_type is str:
            return value
        if as_type is list or getattr(as_type, "__origin__", None) is list:
            return [item.strip() for item in value.split(",") if item.strip()]
        return as_type(value.strip())
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None) -> None:
    """Log a lookup when the logger has been configured."""
    from bytebench.utils.logger import Logger

    if Logger.is_configured():
        Logger.get("env").debug(f"ENV GET {name}={value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T: ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T: ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None: ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None: ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        as_type: Type to convert the value to. ``bool`` treats "false", "0",
            "", "no" and "off" as False; ``list`` splits on commas.
        log: If True, log the access (only once the Logger is configured).

    Returns:
        The converted value, or ``default`` if the variable is not set.

    Raises:
        EnvVarTypeError: If ``as_type`` is given and conversion fails.

    Examples:
        >>> get_env("BYTEBENCH_THREADS", default=4, as_type=int)
        4
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def env_is_set(name: str) -> bool:
    """Check if an environment variable is set and non-empty."""
    value = os.environ.get(name)
    return value is not None and value != ""
