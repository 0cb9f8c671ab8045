"""Environment variable utility functions for MCP Jira."""

import os


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to a truthy value.

    Considers 'true', '1', 'yes', 'y', 'on' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes", "y", "on")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to 'false', '0' or 'no'.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def getenv(*env_var_names: str, default: str | None = None) -> str | None:
    """Return the first non-empty value among several environment variables.

    Used where a setting has a preferred name and a legacy alias
    (e.g. ``JIRA_URL`` / ``JIRA_HOST``).

    Args:
        *env_var_names: Variable names, in order of preference
        default: Value returned when none of them is set

    Returns:
        The first non-empty value, or ``default``
    """
    for name in env_var_names:
        value = os.getenv(name)
        if value:
            return value
    return default
