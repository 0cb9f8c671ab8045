"""
Test fixtures for Jira unit tests.

The atlassian ``Jira`` client is replaced by a MagicMock so the mixins can be
exercised without network access.
"""

from unittest.mock import MagicMock, patch

import pytest
from requests.exceptions import HTTPError

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig


@pytest.fixture
def cloud_config():
    """JiraConfig for a Cloud instance using basic auth."""
    return JiraConfig(
        url="https://test.atlassian.net",
        auth_type="basic",
        username="test@example.com",
        api_token="test-api-token",
    )


@pytest.fixture
def server_config():
    """JiraConfig for a Server/Data Center instance using a PAT."""
    return JiraConfig(
        url="https://jira.example.com",
        auth_type="token",
        personal_token="test-personal-token",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Patch the atlassian Jira class used by JiraClient."""
    with patch("mcp_jira.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = MagicMock()
        yield mock_jira_class


@pytest.fixture
def jira_fetcher(cloud_config, mock_atlassian_jira):
    """JiraFetcher for a Cloud instance with a mocked Jira client."""
    return JiraFetcher(config=cloud_config)


@pytest.fixture
def server_jira_fetcher(server_config, mock_atlassian_jira):
    """JiraFetcher for a Server/Data Center instance with a mocked Jira client."""
    return JiraFetcher(config=server_config)


@pytest.fixture
def http_error():
    """Factory building a requests HTTPError with the given status code."""

    def _make(status_code):
        response = MagicMock()
        response.status_code = status_code
        return HTTPError(f"{status_code} error", response=response)

    return _make
