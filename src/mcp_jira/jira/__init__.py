"""Jira API module for MCP Jira.

This module provides various Jira API client implementations.
"""

from .client import JiraClient
from .config import JiraConfig
from .fields import FieldsMixin
from .issue_types import IssueTypesMixin
from .issues import IssuesMixin
from .links import LinksMixin
from .search import SearchMixin
from .transitions import TransitionsMixin
from .users import UsersMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    LinksMixin,
    FieldsMixin,
    IssueTypesMixin,
    UsersMixin,
    TransitionsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Reading, creating, updating and deleting issues
    - SearchMixin: Listing the issues of a project
    - LinksMixin: Issue links and link types
    - FieldsMixin: Field definitions
    - IssueTypesMixin: Issue types
    - UsersMixin: User lookup
    - TransitionsMixin: Workflow transitions
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
