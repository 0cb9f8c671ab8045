"""
Jira data models for the MCP Jira integration.

This package provides Pydantic models for Jira API data structures and
the Atlassian Document Format converters.
"""

from .adf import adf_to_markdown, text_to_adf
from .common import JiraIssueType, JiraUser
from .link import JiraIssueLinkType

__all__ = [
    "JiraUser",
    "JiraIssueType",
    "JiraIssueLinkType",
    "adf_to_markdown",
    "text_to_adf",
]
