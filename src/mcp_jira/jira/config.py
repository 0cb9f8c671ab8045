"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass
from typing import Literal

from ..utils import getenv, is_atlassian_cloud_url, is_env_ssl_verify, normalize_jira_url


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Handles authentication for both Jira Cloud (using username/API token)
    and Jira Server/Data Center (using personal access token).
    """

    url: str  # Base URL for Jira
    auth_type: Literal["basic", "token"]  # Authentication type
    username: str | None = None  # Email or username (Cloud)
    api_token: str | None = None  # API token (Cloud)
    personal_token: str | None = None  # Personal access token (Server/DC)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    default_assignee: str | None = None  # Assignee for new issues without one

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
            Localhost URLs are always considered non-cloud (Server/Data Center).
        """
        return is_atlassian_cloud_url(self.url)

    @property
    def api_version(self) -> str:
        """REST API version to talk to.

        Cloud uses v3, where rich text fields are ADF documents.
        Server/Data Center only offers v2, where they are plain strings.
        """
        return "3" if self.is_cloud else "2"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = cls.get_url()

        username = getenv("JIRA_USERNAME", "JIRA_EMAIL")
        api_token = os.getenv("JIRA_API_TOKEN")
        personal_token = os.getenv("JIRA_PERSONAL_TOKEN")

        is_cloud = is_atlassian_cloud_url(url)

        match (is_cloud, bool(username and api_token), bool(personal_token)):
            case (True, True, _):
                auth_type = "basic"
            case (True, False, _):
                msg = "Cloud authentication requires JIRA_USERNAME and JIRA_API_TOKEN"
                raise ValueError(msg)
            case (False, _, True):
                auth_type = "token"
            case (False, True, False):
                auth_type = "basic"
            case _:
                msg = "Server/Data Center authentication requires JIRA_PERSONAL_TOKEN"
                raise ValueError(msg)

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
            default_assignee=os.getenv("JIRA_DEFAULT_ASSIGNEE") or None,
        )

    @staticmethod
    def get_url() -> str:
        """Get the Jira URL from environment variables.

        ``JIRA_URL`` is preferred; ``JIRA_HOST`` (a bare host name) is
        accepted as well.

        Returns:
            The Jira base URL

        Raises:
            ValueError: If neither variable is set
        """
        url = getenv("JIRA_URL", "JIRA_HOST")
        if not url:
            error_msg = "Missing required JIRA_URL (or JIRA_HOST) environment variable"
            raise ValueError(error_msg)
        return normalize_jira_url(url)
