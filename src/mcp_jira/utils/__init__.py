"""
Utility functions for the MCP Jira integration.
"""

from .env import getenv, is_env_ssl_verify, is_env_truthy
from .io import is_read_only_mode
from .logging import mask_sensitive
from .urls import is_atlassian_cloud_url, normalize_jira_url

__all__ = [
    "getenv",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "is_env_truthy",
    "is_read_only_mode",
    "mask_sensitive",
    "normalize_jira_url",
]
