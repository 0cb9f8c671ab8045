"""Constants for Jira operations."""

# Named field presets requested from Jira for issue reads.
# Wildcard tokens such as "*navigable" are passed through to Jira as-is.
FIELD_SETS: dict[str, tuple[str, ...]] = {
    "basic": ("summary", "description", "status"),
    "navigable": ("*navigable", "Rank"),
    "full": (
        "*navigable",
        "id",
        "key",
        "summary",
        "description",
        "status",
        "assignee",
        "reporter",
        "created",
        "updated",
        "resolutiondate",
        "parent",
        "subtasks",
        "issuelinks",
        "comment",
        "worklog",
        "Rank",
    ),
}

DEFAULT_FIELD_SET = "navigable"

# Maximum number of issues returned by a project issue listing
MAX_SEARCH_RESULTS = 100
