"""Main FastMCP server setup for Jira integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from fastmcp.tools import Tool as FastMCPTool
from mcp.types import Tool as MCPTool
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira.jira.config import JiraConfig
from mcp_jira.utils.io import is_read_only_mode

from .context import MainAppContext
from .jira import jira_mcp

logger = logging.getLogger("mcp-jira.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Jira MCP server lifespan starting...")
    read_only = is_read_only_mode()

    loaded_jira_config: JiraConfig | None = None
    try:
        loaded_jira_config = JiraConfig.from_env()
        logger.info(
            f"Jira configuration loaded ({loaded_jira_config.url}, "
            f"auth: {loaded_jira_config.auth_type}, "
            f"cloud: {loaded_jira_config.is_cloud})"
        )
    except ValueError as e:
        logger.error(f"Failed to load Jira configuration: {e}")

    app_context = MainAppContext(jira_config=loaded_jira_config, read_only=read_only)
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")

    try:
        yield {"app_lifespan_context": app_context}
    except Exception as e:
        logger.error(f"Error during lifespan: {e}", exc_info=True)
        raise
    finally:
        logger.info("Main Jira MCP server lifespan shutdown complete.")


class JiraMCP(FastMCP[MainAppContext]):
    """Custom FastMCP server class hiding write tools in read-only mode."""

    async def _mcp_list_tools(self) -> list[MCPTool]:
        req_context = self._mcp_server.request_context
        if req_context is None or req_context.lifespan_context is None:
            logger.warning("Lifespan context not available during tool listing.")
            return []

        lifespan_ctx_dict = req_context.lifespan_context
        app_lifespan_state: MainAppContext | None = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )
        read_only = bool(app_lifespan_state and app_lifespan_state.read_only)

        all_tools: dict[str, FastMCPTool] = await self.get_tools()
        filtered_tools: list[MCPTool] = []
        for registered_name, tool_obj in all_tools.items():
            if read_only and "write" in tool_obj.tags:
                logger.debug(
                    f"Excluding tool '{registered_name}' due to read-only mode"
                )
                continue
            filtered_tools.append(tool_obj.to_mcp_tool(name=registered_name))

        logger.debug(f"Listing {len(filtered_tools)} tools (read_only={read_only})")
        return filtered_tools


main_mcp = JiraMCP(name="Jira MCP", lifespan=main_lifespan)
main_mcp.mount(jira_mcp, prefix="jira")


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


logger.info("Added /healthz endpoint for Kubernetes probes")
