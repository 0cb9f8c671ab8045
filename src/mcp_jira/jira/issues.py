"""Module for Jira issue operations."""

import logging
from typing import Any

from ..logging_config import log_function
from ..utils.decorators import handle_jira_api_errors
from .constants import DEFAULT_FIELD_SET
from .transitions import TransitionsMixin
from .users import UsersMixin
from .utils import get_field_set, render_issue_rich_text

logger = logging.getLogger("mcp-jira.jira.issues")


class IssuesMixin(UsersMixin, TransitionsMixin):
    """Mixin for Jira issue operations."""

    @handle_jira_api_errors("Jira API")
    def get_issue(
        self, issue_key: str, field_set: str | None = DEFAULT_FIELD_SET
    ) -> dict[str, Any]:
        """
        Get a Jira issue by key.

        Rich text fields (description, comments) are rendered to Markdown.

        Args:
            issue_key: The issue key (e.g., PROJECT-123)
            field_set: Named field set controlling the requested fields

        Returns:
            The issue as returned by Jira, with rich text as Markdown

        Raises:
            ValueError: If the issue is not found
        """
        fields = ",".join(get_field_set(field_set))
        issue = self.jira.issue(issue_key, fields=fields)
        if not isinstance(issue, dict) or not issue:
            raise ValueError(f"Issue {issue_key} not found")
        return render_issue_rich_text(issue)

    @log_function("create_issue")
    @handle_jira_api_errors("Jira API")
    def create_issue(
        self,
        project_key: str,
        summary: str,
        issue_type: str,
        description: str | None = None,
        assignee: str | None = None,
        labels: list[str] | None = None,
        components: list[str] | None = None,
        priority: str | None = None,
        parent: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a new Jira issue.

        Args:
            project_key: Project key
            summary: Issue summary
            issue_type: Issue type name
            description: Plain text description, converted to ADF on Cloud
            assignee: Email or name of the assignee; falls back to the
                configured default assignee
            labels: Labels to apply
            components: Component names
            priority: Priority name
            parent: Parent issue key (required for subtasks)

        Returns:
            Dictionary with ``id``, ``key`` and ``url`` of the new issue

        Raises:
            ValueError: If the issue cannot be created
        """
        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": summary,
            "issuetype": {"name": issue_type},
        }

        if description:
            fields["description"] = self._format_description(description)

        if assignee:
            fields["assignee"] = self._assignee_field(assignee)
        elif self.config.default_assignee:
            fields["assignee"] = self._default_assignee_field(
                self.config.default_assignee
            )
        if labels:
            fields["labels"] = labels
        if components:
            fields["components"] = [{"name": name} for name in components]
        if priority:
            fields["priority"] = {"name": priority}
        if parent:
            fields["parent"] = {"key": parent}
        elif issue_type.lower() in ("subtask", "sub-task"):
            raise ValueError(
                "Issue type is a sub-task but no parent issue key was given."
            )

        response = self.jira.create_issue(fields=fields)
        issue_key = response.get("key") if isinstance(response, dict) else None
        if not issue_key:
            raise ValueError("No issue key returned from Jira API")

        logger.info(f"Created issue {issue_key} in project {project_key}")
        return {
            "id": response.get("id"),
            "key": issue_key,
            "url": self._browse_url(issue_key),
        }

    @log_function("update_issue")
    @handle_jira_api_errors("Jira API")
    def update_issue(
        self,
        issue_key: str,
        summary: str | None = None,
        description: str | None = None,
        assignee: str | None = None,
        status: str | None = None,
        priority: str | None = None,
    ) -> dict[str, Any]:
        """
        Update fields of an existing issue.

        A status change is applied through the matching workflow
        transition; the other values are sent as a single field update.

        Args:
            issue_key: The issue key
            summary: New summary
            description: New plain text description
            assignee: Email or name of the new assignee
            status: Target status
            priority: New priority name

        Returns:
            Dictionary with ``key`` and ``url`` of the issue
        """
        fields: dict[str, Any] = {}
        if summary:
            fields["summary"] = summary
        if description:
            fields["description"] = self._format_description(description)
        if assignee:
            fields["assignee"] = self._assignee_field(assignee)
        if priority:
            fields["priority"] = {"name": priority}

        if status:
            self.transition_issue_to_status(issue_key, status)

        if fields:
            self.jira.update_issue_field(issue_key, fields)
            logger.info(f"Updated fields {sorted(fields)} of {issue_key}")

        return {"key": issue_key, "url": self._browse_url(issue_key)}

    @log_function("delete_issue")
    @handle_jira_api_errors("Jira API")
    def delete_issue(self, issue_key: str) -> bool:
        """
        Delete a Jira issue and its subtasks.

        Args:
            issue_key: The key of the issue to delete

        Returns:
            True if the issue was deleted successfully
        """
        self.jira.delete_issue(issue_key)
        logger.info(f"Deleted issue {issue_key}")
        return True
