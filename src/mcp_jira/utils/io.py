"""I/O utility functions for MCP Jira."""

from .env import is_env_truthy


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode refuses all write operations (create, update, delete,
    link) while allowing read operations.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    return is_env_truthy("READ_ONLY_MODE", "false")
