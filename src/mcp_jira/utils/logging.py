"""Logging helpers for MCP Jira."""


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret for logging, keeping only the last few characters.

    Args:
        value: The secret (token, password) to mask
        keep_chars: Number of trailing characters left visible

    Returns:
        Masked string, or "Not Provided" for empty values
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return "*" * (len(value) - keep_chars) + value[-keep_chars:]
