"""MCP server entry points for Jira."""

from .main import main_mcp

__all__ = ["main_mcp"]
