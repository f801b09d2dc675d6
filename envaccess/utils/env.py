"""Environment variable utilities."""
from __future__ import annotations

import os

from loguru import logger

from ..schemas.result import ErrorResult, OkResult


def get_env(key: str) -> OkResult | ErrorResult:
    """Look up a variable in the process environment.

    An empty value is still a hit; only absence yields an error result.

    Args:
        key: Environment variable name

    Returns:
        ``OkResult`` with the value if the variable is set, else ``ErrorResult``
    """
    value = os.environ.get(key)
    if value is None:
        logger.debug(f"Environment variable not set: {key}")
        return ErrorResult()
    return OkResult(value=value)


def set_env(key: str, value: str) -> bool:
    """Write a variable into the process environment, overwriting any prior value.

    Child processes started afterwards inherit the new value.

    Args:
        key: Environment variable name
        value: Value to store

    Returns:
        Always True

    Raises:
        ValueError: Propagated from the host for ``=`` in the key or an embedded NUL
        OSError: Propagated from the host for keys putenv refuses, such as an empty key
    """
    os.environ[key] = value
    logger.debug(f"Set environment variable: {key}")
    return True


def get_env_var(name: str, default: str | None = None) -> str | None:
    """Retrieve an optional environment variable with a default value.

    Args:
        name: Environment variable name
        default: Default value if variable is not set

    Returns:
        Environment variable value or default
    """
    result = get_env(name)
    if isinstance(result, OkResult):
        return result.value
    return default
