"""Base client module for Jira API interactions."""

import logging

from atlassian import Jira

from ..models.jira.adf import text_to_adf
from ..utils import mask_sensitive
from .config import JiraConfig

logger = logging.getLogger("mcp-jira.jira.client")


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            ValueError: If configuration is missing or invalid.
        """
        self.config = config or JiraConfig.from_env()

        if self.config.auth_type == "token":
            logger.debug(
                f"Connecting to {self.config.url} with personal access token "
                f"{mask_sensitive(self.config.personal_token)}"
            )
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                api_version=self.config.api_version,
            )
        else:
            logger.debug(
                f"Connecting to {self.config.url} as {self.config.username} "
                f"with API token {mask_sensitive(self.config.api_token)}"
            )
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                api_version=self.config.api_version,
            )

    def _browse_url(self, issue_key: str) -> str:
        """Return the web URL of an issue."""
        return f"{self.config.url.rstrip('/')}/browse/{issue_key}"

    def _format_description(self, description: str) -> dict | str:
        """Convert a plain text description to the format Jira expects.

        Cloud (REST v3) stores rich text as ADF; Server/Data Center takes
        the text as-is.
        """
        if self.config.is_cloud:
            return text_to_adf(description)
        return description
