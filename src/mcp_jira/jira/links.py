"""Module for Jira issue link operations."""

import logging
from typing import Any

from ..models.jira import JiraIssueLinkType
from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira.links")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    @handle_jira_api_errors("Jira API")
    def get_issue_link_types(self) -> list[JiraIssueLinkType]:
        """
        Get all available issue link types.

        Returns:
            List of JiraIssueLinkType objects

        Raises:
            MCPJiraAuthenticationError: If authentication fails
                with the Jira API (401/403)
        """
        link_types = self.jira.get_issue_link_types()
        if not isinstance(link_types, list):
            msg = (
                "Unexpected return value type from "
                f"`jira.get_issue_link_types`: {type(link_types)}"
            )
            logger.error(msg)
            raise TypeError(msg)

        return [JiraIssueLinkType.from_api_response(lt) for lt in link_types]

    @handle_jira_api_errors("Jira API")
    def create_issue_link(
        self, inward_issue_key: str, outward_issue_key: str, link_type: str
    ) -> dict[str, Any]:
        """
        Create a link between two issues.

        Args:
            inward_issue_key: Key of the inward issue (e.g. the blocked issue)
            outward_issue_key: Key of the outward issue (e.g. the blocking issue)
            link_type: Name of the link type (e.g. "Blocks")

        Returns:
            Dictionary describing the created link

        Raises:
            ValueError: If required fields are missing
            MCPJiraAuthenticationError: If authentication fails
                with the Jira API (401/403)
        """
        if not link_type:
            raise ValueError("Link type is required")
        if not inward_issue_key:
            raise ValueError("Inward issue key is required")
        if not outward_issue_key:
            raise ValueError("Outward issue key is required")

        self.jira.create_issue_link(
            {
                "type": {"name": link_type},
                "inwardIssue": {"key": inward_issue_key},
                "outwardIssue": {"key": outward_issue_key},
            }
        )
        logger.info(
            f"Linked {inward_issue_key} and {outward_issue_key} with '{link_type}'"
        )
        return {
            "inward": inward_issue_key,
            "outward": outward_issue_key,
            "type": link_type,
        }
