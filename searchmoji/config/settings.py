"""Configuration utilities for searchmoji."""

import os
from typing import List, Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import BUNDLED_DATA_FILE, ENV_VAR_DEFINITIONS


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")

    if value is None or valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all searchmoji environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Args:
        name: The environment variable name.
        validate: Whether to validate the value against known definitions.

    Returns:
        The environment variable value, its default, or None.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error or "Invalid environment variable", setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_data_source(override: Optional[str] = None) -> str:
    """Resolve where the record collection is loaded from.

    An explicit override wins, then SEARCHMOJI_DATA_SOURCE, then the bundled dataset.
    """
    if override:
        return override
    return get_env_var("SEARCHMOJI_DATA_SOURCE") or str(BUNDLED_DATA_FILE)


def get_log_level() -> str:
    """Get the configured log level name."""
    level = get_env_var("SEARCHMOJI_LOG_LEVEL") or "INFO"
    return level.upper()

