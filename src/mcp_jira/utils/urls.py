"""URL-related utility functions for MCP Jira."""

import re
from urllib.parse import urlparse


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Localhost and private network addresses are always Server/Data Center
    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        ".atlassian.net" in hostname
        or ".jira.com" in hostname
        or ".jira-dev.com" in hostname
        or "api.atlassian.com" in hostname
        or ".atlassian-us-gov-mod.net" in hostname
        or ".atlassian-us-gov.net" in hostname
    )


def normalize_jira_url(url_or_host: str) -> str:
    """Turn a bare host name into a base URL.

    ``your-domain.atlassian.net`` becomes ``https://your-domain.atlassian.net``;
    URLs that already carry a scheme are returned without a trailing slash.

    Args:
        url_or_host: Host name or URL

    Returns:
        Base URL
    """
    value = url_or_host.strip()
    if not re.match(r"^https?://", value, re.IGNORECASE):
        value = f"https://{value}"
    return value.rstrip("/")
