import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from fastmcp import Context
from requests.exceptions import HTTPError

from mcp_jira.exceptions import MCPJiraAuthenticationError

logger = logging.getLogger("mcp-jira.utils.decorators")


F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def check_write_access(func: F) -> F:
    """
    Decorator for FastMCP tools to check if the application is in read-only mode.
    If in read-only mode, it raises a ValueError.
    Assumes the decorated function is async and has `ctx: Context` as its first argument.
    """

    @wraps(func)
    async def wrapper(ctx: Context, *args: Any, **kwargs: Any) -> Any:
        lifespan_ctx_dict = ctx.request_context.lifespan_context
        app_lifespan_ctx = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )

        if app_lifespan_ctx is not None and app_lifespan_ctx.read_only:
            tool_name = func.__name__
            action_description = tool_name.replace("_", " ")
            logger.warning(f"Attempted to call tool '{tool_name}' in read-only mode.")
            raise ValueError(f"Cannot {action_description} in read-only mode.")

        return await func(ctx, *args, **kwargs)

    return wrapper  # type: ignore


def handle_jira_api_errors(service_name: str = "Jira API") -> Callable:
    """
    Decorator translating authentication failures of the Jira REST API.

    HTTP 401/403 responses become MCPJiraAuthenticationError; every other
    HTTP error is logged and re-raised unchanged.

    Args:
        service_name: Name of the service for error messages.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return func(self, *args, **kwargs)
            except HTTPError as http_err:
                status_code = (
                    http_err.response.status_code
                    if http_err.response is not None
                    else None
                )
                if status_code in (401, 403):
                    error_msg = (
                        f"Authentication failed for {service_name} ({status_code}). "
                        "Token may be expired or invalid. Please verify credentials."
                    )
                    logger.error(error_msg)
                    raise MCPJiraAuthenticationError(error_msg) from http_err
                logger.error(f"HTTP error during {func.__name__}: {http_err}")
                raise

        return wrapper

    return decorator
