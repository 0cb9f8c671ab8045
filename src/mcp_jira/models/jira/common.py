"""
Common Jira entity models.

This module provides Pydantic models for Jira users and issue types,
which are returned by several tools.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN

logger = logging.getLogger(__name__)


class JiraUser(ApiModel):
    """
    Model representing a Jira user.
    """

    account_id: str | None = None
    name: str | None = None
    display_name: str = UNKNOWN
    email: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Server/Data Center instances have no ``accountId``; the user key or
        name is used instead. The username, which can differ from
        the key (e.g. ``JIRAUSER10100``), is kept in ``name``.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        account_id = data.get("accountId") or data.get("key") or data.get("name")

        return cls(
            account_id=str(account_id) if account_id else None,
            name=str(data["name"]) if data.get("name") else None,
            display_name=str(data.get("displayName", UNKNOWN)),
            email=data.get("emailAddress"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "accountId": self.account_id,
            "displayName": self.display_name,
            "emailAddress": self.email,
        }


class JiraIssueType(ApiModel):
    """
    Model representing a Jira issue type.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    description: str = EMPTY_STRING
    subtask: bool = False

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueType":
        """
        Create a JiraIssueType from a Jira API response.

        Args:
            data: The issue type data from the Jira API

        Returns:
            A JiraIssueType instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue type data")
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", UNKNOWN)),
            description=str(data.get("description") or EMPTY_STRING),
            subtask=bool(data.get("subtask", False)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "subtask": self.subtask,
        }
