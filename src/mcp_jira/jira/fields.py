"""Module for Jira field operations."""

import logging
from typing import Any

from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira.fields")


class FieldsMixin(JiraClient):
    """Mixin for Jira field operations."""

    @handle_jira_api_errors("Jira API")
    def get_fields(self) -> list[dict[str, Any]]:
        """
        Get all fields available for issue creation and updates.

        Returns:
            List of field definitions as returned by Jira
        """
        fields = self.jira.get_all_fields()
        if not isinstance(fields, list):
            msg = f"Unexpected return value type from `jira.get_all_fields`: {type(fields)}"
            logger.error(msg)
            raise TypeError(msg)
        logger.debug(f"Retrieved {len(fields)} fields from Jira")
        return fields
