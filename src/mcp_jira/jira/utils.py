"""Utility functions for Jira operations."""

import logging
from typing import Any

from ..models.jira.adf import adf_to_markdown
from .constants import DEFAULT_FIELD_SET, FIELD_SETS

logger = logging.getLogger("mcp-jira.jira.utils")


def get_field_set(field_set: str | None = DEFAULT_FIELD_SET) -> list[str]:
    """
    Get the Jira fields to request for a named field set.

    Args:
        field_set: One of "basic", "navigable" or "full". Anything else
            (including None) falls back to "navigable".

    Returns:
        A new list of field names
    """
    fields = FIELD_SETS.get(field_set or "")
    if fields is None:
        logger.debug(f"Unknown field set '{field_set}', using '{DEFAULT_FIELD_SET}'")
        fields = FIELD_SETS[DEFAULT_FIELD_SET]
    return list(fields)


def render_issue_rich_text(issue: dict[str, Any]) -> dict[str, Any]:
    """
    Replace ADF documents in an issue's rich text fields with Markdown.

    The description and, when present, comment bodies are converted.
    Fields that are already plain strings (Server/Data Center) are left
    untouched. The issue dictionary is updated in place and returned.

    Args:
        issue: Issue as returned by the Jira REST API

    Returns:
        The same issue dictionary
    """
    fields = issue.get("fields")
    if not isinstance(fields, dict):
        return issue

    if isinstance(fields.get("description"), dict):
        fields["description"] = adf_to_markdown(fields["description"])

    comment_field = fields.get("comment")
    if isinstance(comment_field, dict):
        for comment in comment_field.get("comments") or []:
            if isinstance(comment, dict) and isinstance(comment.get("body"), dict):
                comment["body"] = adf_to_markdown(comment["body"])

    return issue
