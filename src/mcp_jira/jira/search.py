"""Module for Jira search operations."""

import logging
from typing import Any

from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient
from .constants import DEFAULT_FIELD_SET, MAX_SEARCH_RESULTS
from .utils import get_field_set, render_issue_rich_text

logger = logging.getLogger("mcp-jira.jira.search")


def build_project_jql(project_key: str, jql: str | None = None) -> str:
    """Restrict a JQL filter to a single project.

    Args:
        project_key: The project key
        jql: Optional additional JQL condition

    Returns:
        ``project = KEY`` or ``project = KEY AND <jql>``
    """
    if jql:
        return f"project = {project_key} AND {jql}"
    return f"project = {project_key}"


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    @handle_jira_api_errors("Jira API")
    def get_project_issues(
        self,
        project_key: str,
        jql: str | None = None,
        field_set: str | None = DEFAULT_FIELD_SET,
    ) -> list[dict[str, Any]]:
        """
        Get the issues and subtasks of a project.

        Args:
            project_key: The project key
            jql: Optional JQL condition added to the project filter
            field_set: Named field set controlling the requested fields

        Returns:
            List of issues, with rich text descriptions rendered to Markdown
        """
        query = build_project_jql(project_key, jql)
        fields = get_field_set(field_set)
        logger.debug(f"Searching issues with JQL: {query}")

        if self.config.is_cloud:
            response = self.jira.post(
                "rest/api/3/search/jql",
                json={
                    "jql": query,
                    "maxResults": MAX_SEARCH_RESULTS,
                    "fields": fields,
                },
            )
        else:
            response = self.jira.jql(
                query, fields=",".join(fields), limit=MAX_SEARCH_RESULTS
            )

        if not isinstance(response, dict):
            msg = f"Unexpected return value type from Jira search: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        issues = response.get("issues") or []
        return [
            render_issue_rich_text(issue) for issue in issues if isinstance(issue, dict)
        ]
