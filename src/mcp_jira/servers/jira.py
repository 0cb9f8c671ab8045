"""Jira FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.jira.constants import DEFAULT_FIELD_SET
from mcp_jira.servers.dependencies import get_jira_fetcher
from mcp_jira.utils.decorators import check_write_access

logger = logging.getLogger("mcp-jira.servers.jira")

# Cloud project keys are 2-10 chars; Server/Data Center allows longer keys.
ISSUE_KEY_PATTERN = r"^[A-Z][A-Z0-9]+-\d+$"
PROJECT_KEY_PATTERN = r"^[A-Z][A-Z0-9]+$"

FieldSetName = Literal["basic", "navigable", "full"]

FIELD_SET_DESCRIPTION = (
    "(Optional) Field set determining which fields are returned: "
    "'basic' (summary, description, status), 'navigable' (all navigable fields) "
    "or 'full' (navigable fields plus links, comments, worklog). Default: 'navigable'"
)

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions="Provides tools for interacting with Atlassian Jira.",
)


def _dumps(data: object) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Project Issues", "readOnlyHint": True},
)
async def get_issues(
    ctx: Context,
    project_key: Annotated[
        str,
        Field(
            description="Jira project key (e.g., 'PP' or 'TEST')",
            pattern=PROJECT_KEY_PATTERN,
        ),
    ],
    jql: Annotated[
        str | None,
        Field(
            description=(
                "(Optional) Jira Query Language (JQL) condition to filter issues, "
                "combined with the project filter (e.g., 'status = \"In Progress\"')"
            ),
            default=None,
        ),
    ] = None,
    field_set: Annotated[
        FieldSetName,
        Field(description=FIELD_SET_DESCRIPTION, default=DEFAULT_FIELD_SET),
    ] = DEFAULT_FIELD_SET,
) -> str:
    """Get all issues and subtasks for a Jira project with optional JQL filtering.

    Args:
        ctx: The FastMCP context.
        project_key: The project key.
        jql: Optional JQL condition.
        field_set: Named field set.

    Returns:
        JSON string representing the list of issues, with descriptions as Markdown.
    """
    jira = await get_jira_fetcher(ctx)
    issues = jira.get_project_issues(project_key, jql=jql, field_set=field_set)
    return _dumps(issues)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Read Issue", "readOnlyHint": True},
)
async def read_issue(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(
            description="Jira issue key to read (e.g., 'PROJECT-123')",
            pattern=ISSUE_KEY_PATTERN,
        ),
    ],
    field_set: Annotated[
        FieldSetName,
        Field(description=FIELD_SET_DESCRIPTION, default=DEFAULT_FIELD_SET),
    ] = DEFAULT_FIELD_SET,
) -> str:
    """Read a single Jira issue, providing detailed information about the issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        field_set: Named field set.

    Returns:
        JSON string representing the issue, with rich text as Markdown.
    """
    jira = await get_jira_fetcher(ctx)
    logger.info(f"Reading issue: {issue_key}")
    issue = jira.get_issue(issue_key, field_set=field_set)
    return _dumps(issue)


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Create Issue", "destructiveHint": True},
)
@check_write_access
async def create_issue(
    ctx: Context,
    project_key: Annotated[
        str,
        Field(
            description="Jira project key (e.g., 'PP' or 'TEST')",
            pattern=PROJECT_KEY_PATTERN,
        ),
    ],
    summary: Annotated[str, Field(description="Summary/title for the new issue", min_length=1)],
    issue_type: Annotated[
        str,
        Field(description="Type of issue (e.g., 'Task', 'Bug', 'Story', 'Subtask')", min_length=1),
    ],
    description: Annotated[
        str | None,
        Field(
            description=(
                "(Optional) Detailed description. Lines starting with '- ' or '1. ' "
                "become lists; short lines followed by a blank line become headings."
            ),
            default=None,
        ),
    ] = None,
    assignee: Annotated[
        str | None,
        Field(description="(Optional) Email of the assignee", default=None),
    ] = None,
    labels: Annotated[
        list[str] | None,
        Field(description="(Optional) Labels to apply to the issue", default=None),
    ] = None,
    components: Annotated[
        list[str] | None,
        Field(description="(Optional) Component names to include", default=None),
    ] = None,
    priority: Annotated[
        str | None,
        Field(description="(Optional) Priority level (e.g., 'High')", default=None),
    ] = None,
    parent: Annotated[
        str | None,
        Field(
            description="(Optional) Parent issue key, required for subtasks",
            default=None,
            pattern=ISSUE_KEY_PATTERN,
        ),
    ] = None,
) -> str:
    """Create a new issue in Jira with specified fields.

    Args:
        ctx: The FastMCP context.
        project_key: The project key.
        summary: Issue summary.
        issue_type: Issue type name.
        description: Plain text description.
        assignee: Assignee email.
        labels: Labels.
        components: Component names.
        priority: Priority name.
        parent: Parent issue key.

    Returns:
        JSON string with the id, key and URL of the created issue.

    Raises:
        ValueError: If in read-only mode or Jira client is unavailable.
    """
    jira = await get_jira_fetcher(ctx)
    issue = jira.create_issue(
        project_key=project_key,
        summary=summary,
        issue_type=issue_type,
        description=description,
        assignee=assignee,
        labels=labels,
        components=components,
        priority=priority,
        parent=parent,
    )
    return _dumps({"message": "Issue created successfully", "issue": issue})


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Update Issue", "destructiveHint": True},
)
@check_write_access
async def update_issue(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(
            description="Jira issue key to update (e.g., 'PROJECT-123')",
            pattern=ISSUE_KEY_PATTERN,
        ),
    ],
    summary: Annotated[
        str | None, Field(description="(Optional) New summary/title", default=None)
    ] = None,
    description: Annotated[
        str | None, Field(description="(Optional) New description", default=None)
    ] = None,
    assignee: Annotated[
        str | None, Field(description="(Optional) Email of the new assignee", default=None)
    ] = None,
    status: Annotated[
        str | None,
        Field(description="(Optional) New status (e.g., 'In Progress')", default=None),
    ] = None,
    priority: Annotated[
        str | None, Field(description="(Optional) New priority", default=None)
    ] = None,
) -> str:
    """Update an existing Jira issue's fields.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        summary: New summary.
        description: New plain text description.
        assignee: New assignee email.
        status: Target status, applied through a workflow transition.
        priority: New priority.

    Returns:
        JSON string with the key and URL of the updated issue.

    Raises:
        ValueError: If in read-only mode, Jira client unavailable, or the status is unreachable.
    """
    jira = await get_jira_fetcher(ctx)
    issue = jira.update_issue(
        issue_key=issue_key,
        summary=summary,
        description=description,
        assignee=assignee,
        status=status,
        priority=priority,
    )
    return _dumps({"message": "Issue updated successfully", "issue": issue})


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Delete Issue", "destructiveHint": True},
)
@check_write_access
async def delete_issue(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(
            description="Jira issue key to delete (e.g., 'PROJECT-123')",
            pattern=ISSUE_KEY_PATTERN,
        ),
    ],
) -> str:
    """Delete a Jira issue or subtask.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        JSON string indicating success.

    Raises:
        ValueError: If in read-only mode or Jira client unavailable.
    """
    jira = await get_jira_fetcher(ctx)
    jira.delete_issue(issue_key)
    return _dumps({"message": "Issue deleted successfully", "issueKey": issue_key})


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Create Issue Link", "destructiveHint": True},
)
@check_write_access
async def create_issue_link(
    ctx: Context,
    inward_issue_key: Annotated[
        str,
        Field(
            description="Key of the inward issue (e.g., blocked issue 'PROJECT-123')",
            pattern=ISSUE_KEY_PATTERN,
        ),
    ],
    outward_issue_key: Annotated[
        str,
        Field(
            description="Key of the outward issue (e.g., blocking issue 'PROJECT-456')",
            pattern=ISSUE_KEY_PATTERN,
        ),
    ],
    link_type: Annotated[
        str,
        Field(description="Type of issue link (e.g., 'Blocks', 'Relates')", min_length=1),
    ],
) -> str:
    """Create a link between two Jira issues (e.g., blocks, relates to).

    Args:
        ctx: The FastMCP context.
        inward_issue_key: Key of the inward issue.
        outward_issue_key: Key of the outward issue.
        link_type: Link type name.

    Returns:
        JSON string describing the created link.
    """
    jira = await get_jira_fetcher(ctx)
    link = jira.create_issue_link(
        inward_issue_key=inward_issue_key,
        outward_issue_key=outward_issue_key,
        link_type=link_type,
    )
    return _dumps({"message": "Issue link created successfully", "link": link})


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Fields", "readOnlyHint": True},
)
async def list_fields(ctx: Context) -> str:
    """List all available fields in Jira for issue creation and updates.

    Args:
        ctx: The FastMCP context.

    Returns:
        JSON string representing the list of field definitions.
    """
    jira = await get_jira_fetcher(ctx)
    return _dumps(jira.get_fields())


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Issue Types", "readOnlyHint": True},
)
async def list_issue_types(
    ctx: Context,
    project_key: Annotated[
        str | None,
        Field(
            description="(Optional) Project key to filter issue types by project",
            default=None,
            pattern=PROJECT_KEY_PATTERN,
        ),
    ] = None,
) -> str:
    """List all available Jira issue types with optional project filtering.

    Args:
        ctx: The FastMCP context.
        project_key: Optional project key.

    Returns:
        JSON string representing the list of issue types.
    """
    jira = await get_jira_fetcher(ctx)
    issue_types = jira.get_issue_types(project_key)
    return _dumps([issue_type.to_simplified_dict() for issue_type in issue_types])


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Link Types", "readOnlyHint": True},
)
async def list_link_types(ctx: Context) -> str:
    """List all available Jira issue link types (e.g., blocks, is blocked by).

    Args:
        ctx: The FastMCP context.

    Returns:
        JSON string representing the list of link types.
    """
    jira = await get_jira_fetcher(ctx)
    link_types = jira.get_issue_link_types()
    return _dumps([link_type.to_simplified_dict() for link_type in link_types])


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get User", "readOnlyHint": True},
)
async def get_user(
    ctx: Context,
    email: Annotated[str, Field(description="Jira user's email address", min_length=1)],
) -> str:
    """Get a Jira user's account ID by their email address.

    Args:
        ctx: The FastMCP context.
        email: Email address.

    Returns:
        JSON string with the account ID, display name and email.

    Raises:
        ValueError: If no user matches the email.
    """
    jira = await get_jira_fetcher(ctx)
    user = jira.find_user(email)
    if user is None:
        raise ValueError(f"No user found with email: {email}")
    return _dumps(user.to_simplified_dict())
