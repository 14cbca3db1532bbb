"""
Configuration validation utilities.

Environment values are strings; these helpers turn them into typed settings
and fail with a readable ConfigurationError when they cannot.
"""
import os
import warnings
from typing import Optional

from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)
    
    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default
    
    return value


def get_float_env(key: str, default: float) -> float:
    """
    Read a float setting from the environment.
    
    :param key: Environment variable name
    :param default: Value used when the variable is unset or blank
    :return: Parsed float
    :raises: ConfigurationError if the value is not a number
    """
    raw = get_optional_env(key)
    if raw is None or not raw.strip():
        return default
    
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(
            f"{key} must be a number, got {raw!r}.\n"
            f"Unset it to use the default ({default})."
        ) from None


def get_int_env(key: str, default: int) -> int:
    """
    Read an integer setting from the environment.
    
    :param key: Environment variable name
    :param default: Value used when the variable is unset or blank
    :return: Parsed integer
    :raises: ConfigurationError if the value is not an integer
    """
    raw = get_optional_env(key)
    if raw is None or not raw.strip():
        return default
    
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{key} must be an integer, got {raw!r}.\n"
            f"Unset it to use the default ({default})."
        ) from None


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    
    placeholder_patterns = [
        "your_",
        "placeholder",
        "example",
        "xxx",
        "replace",
        "todo",
    ]
    
    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)
