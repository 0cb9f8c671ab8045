"""
Pydantic models for Jira API responses and ADF conversion.
"""

from .base import ApiModel
from .jira import (
    JiraIssueLinkType,
    JiraIssueType,
    JiraUser,
    adf_to_markdown,
    text_to_adf,
)

__all__ = [
    "ApiModel",
    "JiraIssueLinkType",
    "JiraIssueType",
    "JiraUser",
    "adf_to_markdown",
    "text_to_adf",
]
