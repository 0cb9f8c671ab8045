"""Module for Jira issue type operations."""

import logging

from requests.exceptions import HTTPError

from ..models.jira import JiraIssueType
from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira.issue_types")


class IssueTypesMixin(JiraClient):
    """Mixin for Jira issue type operations."""

    @handle_jira_api_errors("Jira API")
    def get_issue_types(self, project_key: str | None = None) -> list[JiraIssueType]:
        """
        Get issue types, optionally restricted to those used by a project.

        If the project cannot be read, all issue types are returned.

        Args:
            project_key: Optional project key to filter by

        Returns:
            List of JiraIssueType objects
        """
        issue_types = self.jira.get_issue_types() or []

        if project_key:
            try:
                project = self.jira.get_project(project_key)
            except HTTPError as e:
                if e.response is not None and e.response.status_code in (401, 403):
                    raise
                logger.error(f"Error getting project {project_key}: {e}")
                project = None

            project_types = (project or {}).get("issueTypes")
            if project_types:
                project_type_ids = {str(t.get("id")) for t in project_types}
                issue_types = [
                    t for t in issue_types if str(t.get("id")) in project_type_ids
                ]

        return [JiraIssueType.from_api_response(t) for t in issue_types]
