"""Module for Jira workflow transition operations."""

import logging
from typing import Any

from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira.transitions")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    @handle_jira_api_errors("Jira API")
    def get_available_transitions(self, issue_key: str) -> list[dict[str, Any]]:
        """
        Get the transitions currently available for an issue.

        Args:
            issue_key: The issue key

        Returns:
            List of transitions, each with at least ``id`` and ``name``
        """
        transitions = self.jira.get_issue_transitions(issue_key)
        return transitions if isinstance(transitions, list) else []

    @handle_jira_api_errors("Jira API")
    def transition_issue_to_status(self, issue_key: str, status: str) -> str:
        """
        Move an issue to a status through the matching transition.

        The transition is matched by name, case-insensitively.

        Args:
            issue_key: The issue key
            status: Target status / transition name

        Returns:
            The name of the transition that was applied

        Raises:
            ValueError: If no available transition matches the status
        """
        transitions = self.get_available_transitions(issue_key)
        wanted = status.lower()
        for transition in transitions:
            if str(transition.get("name", "")).lower() == wanted:
                self.jira.set_issue_status_by_transition_id(
                    issue_key, transition["id"]
                )
                logger.info(f"Transitioned {issue_key} via '{transition['name']}'")
                return str(transition["name"])

        available = ", ".join(str(t.get("name")) for t in transitions) or "none"
        raise ValueError(
            f"No transition to status '{status}' for {issue_key}. "
            f"Available transitions: {available}"
        )
