"""
Base models for the MCP Jira integration.

API models are built from raw Jira REST responses with
``from_api_response`` and exported to tool responses with
``to_simplified_dict``.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """Base class for models built from Jira API responses."""

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Create a model instance from an API response.

        Args:
            data: The raw API response data
            **kwargs: Additional context for model construction

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert the model to a simplified dictionary for tool responses."""
        return self.model_dump(exclude_none=True)
