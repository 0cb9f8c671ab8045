"""
Root pytest configuration file for MCP Jira tests.

Provides the anyio backend and fixtures that keep tests independent of the
environment variables of the machine running them.
"""

import pytest

JIRA_ENV_VARS = (
    "JIRA_URL",
    "JIRA_HOST",
    "JIRA_USERNAME",
    "JIRA_EMAIL",
    "JIRA_API_TOKEN",
    "JIRA_PERSONAL_TOKEN",
    "JIRA_SSL_VERIFY",
    "JIRA_DEFAULT_ASSIGNEE",
    "READ_ONLY_MODE",
)


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove all Jira related environment variables."""
    for name in JIRA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def cloud_environment(clean_environment):
    """Environment for a Jira Cloud instance with basic auth."""
    clean_environment.setenv("JIRA_URL", "https://test.atlassian.net")
    clean_environment.setenv("JIRA_USERNAME", "test@example.com")
    clean_environment.setenv("JIRA_API_TOKEN", "test-api-token")
    return clean_environment


@pytest.fixture
def server_environment(clean_environment):
    """Environment for a Jira Server/Data Center instance with a PAT."""
    clean_environment.setenv("JIRA_URL", "https://jira.example.com")
    clean_environment.setenv("JIRA_PERSONAL_TOKEN", "test-personal-token")
    return clean_environment
