class MCPJiraError(Exception):
    """Base exception for MCP Jira errors."""

    pass


class MCPJiraAuthenticationError(MCPJiraError):
    """Raised when Jira API authentication fails (401/403)."""

    pass
