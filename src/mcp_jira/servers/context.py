from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira.jira.config import JiraConfig


@dataclass(frozen=True)
class MainAppContext:
    """Context holding the Jira config and server settings (no fetchers)."""

    jira_config: JiraConfig | None = None
    read_only: bool = False
