"""Module for Jira user operations."""

import logging

from ..models.jira import JiraUser
from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira.users")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    @handle_jira_api_errors("Jira API")
    def find_user(self, query: str) -> JiraUser | None:
        """Find the first user matching an email address or name.

        Args:
            query: Email address, username or display name

        Returns:
            The matching user, or None if nobody matches
        """
        if self.config.is_cloud:
            users = self.jira.user_find_by_user_string(query=query, limit=1)
        else:
            users = self.jira.user_find_by_user_string(username=query, limit=1)

        if not isinstance(users, list) or not users:
            logger.info(f"No user found matching '{query}'")
            return None

        if len(users) > 1:
            logger.warning(f"Multiple users found for '{query}', using first match")
        return JiraUser.from_api_response(users[0])

    def _user_reference(self, user: JiraUser | None) -> dict[str, str] | None:
        """Build a user reference (``accountId`` on Cloud, ``name`` on Server/DC)."""
        if user is None:
            return None
        if self.config.is_cloud:
            return {"accountId": user.account_id} if user.account_id else None
        username = user.name or user.account_id
        return {"name": username} if username else None

    def _assignee_field(self, assignee: str) -> dict[str, str]:
        """Build the ``assignee`` field value for an issue payload.

        Args:
            assignee: Email address, username or display name

        Raises:
            ValueError: If no user matches
        """
        reference = self._user_reference(self.find_user(assignee))
        if reference is None:
            raise ValueError(f"No user found matching '{assignee}'")
        logger.debug(f"Resolved assignee '{assignee}' to {reference}")
        return reference

    def _default_assignee_field(self, default_assignee: str) -> dict[str, str]:
        """Build the ``assignee`` field for the configured default assignee.

        The value may be an email address or an account ID. Account IDs are
        not matched by the user search, so a value nobody matches is sent
        as is.
        """
        reference = self._user_reference(self.find_user(default_assignee))
        if reference is not None:
            return reference
        logger.debug(f"Using default assignee '{default_assignee}' as an account ID")
        if self.config.is_cloud:
            return {"accountId": default_assignee}
        return {"name": default_assignee}
