"""Default values shared by the Jira models."""

EMPTY_STRING = ""
UNKNOWN = "Unknown"

JIRA_DEFAULT_ID = "0"
