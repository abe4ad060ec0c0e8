"""MCP server (official python-sdk) exposing mcp_tools_themeparks tools.

This uses FastMCP from the official MCP Python SDK:
- Tools are async Python functions registered with @mcp.tool(); blocking API calls run in worker threads.
- Schemas are derived automatically from type hints / pydantic Field metadata.
- Transport is stdio by default (MCP host config), or streamable HTTP via Uvicorn.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Optional

import sys
import argparse
import logging

from anyio import to_thread
import uvicorn
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from ..core.config import Settings, load_settings
from ..core.errors import ConfigError
from ..core.schemas import UUID_PATTERN, YEAR_MAX, YEAR_MIN, ToolResponse
from ..services import entities
from ..services.client import ThemeParksClient
from ..services.help import get_help_text


SERVER_NAME = "ThemeParks.wiki MCP Server"
SERVER_DESCRIPTION = (
    "Provides access to real-time and static data for theme parks, including destinations, "
    "attractions, wait times, and schedules from ThemeParks.wiki."
)

EntityId = Annotated[
    str,
    Field(
        pattern=UUID_PATTERN,
        description=(
            "The unique GUID identifier for the entity (e.g., a specific destination, "
            "park, attraction, show, or restaurant)."
        ),
    ),
]

logger = logging.getLogger("themeparks-mcp")
logging.basicConfig(stream=sys.stderr, level=logging.INFO)


def to_call_tool_result(response: ToolResponse) -> CallToolResult:
    """Wrap a ToolResponse into the MCP tool result (single text block + isError)."""
    return CallToolResult(
        content=[TextContent(type="text", text=response.text)],
        isError=response.is_error,
    )


async def _run(operation: Callable[..., ToolResponse], *args: Any) -> CallToolResult:
    """Run a blocking service call in a worker thread so concurrent tool calls interleave."""
    response = await to_thread.run_sync(operation, *args)
    return to_call_tool_result(response)


# ---------------------------------------------------------------------------
# MCP-Server & Tools
# ---------------------------------------------------------------------------

def create_server(settings: Settings) -> FastMCP:
    """Build the FastMCP server with all ThemeParks tools bound to one API client."""
    mcp = FastMCP(name=SERVER_NAME, instructions=SERVER_DESCRIPTION, stateless_http=False)
    client = ThemeParksClient(settings)

    @mcp.tool(
        name="list_destinations",
        description=(
            "Retrieves a list of all available top-level theme park destinations "
            "(e.g., Walt Disney World Resort, Universal Orlando Resort)."
        ),
    )
    async def list_destinations() -> CallToolResult:
        logger.info("list_destinations called")
        return await _run(entities.list_destinations, client)

    @mcp.tool(
        name="get_entity_details",
        description=(
            "Fetches detailed static information for a specific entity "
            "(like a park, attraction, or restaurant) using its unique ID."
        ),
    )
    async def get_entity_details(entity_id: EntityId) -> CallToolResult:
        logger.info("get_entity_details called with entity_id=%s", entity_id)
        return await _run(entities.get_entity_details, client, entity_id)

    @mcp.tool(
        name="get_entity_children",
        description=(
            "Retrieves all direct child entities for a given parent entity ID "
            "(e.g., all parks within a destination, or all attractions within a park)."
        ),
    )
    async def get_entity_children(entity_id: EntityId) -> CallToolResult:
        logger.info("get_entity_children called with entity_id=%s", entity_id)
        return await _run(entities.get_entity_children, client, entity_id)

    @mcp.tool(
        name="get_entity_live_data",
        description=(
            "Fetches live data for a specific entity and its children. This can include "
            "attraction wait times, park operating hours, and show times."
        ),
    )
    async def get_entity_live_data(entity_id: EntityId) -> CallToolResult:
        logger.info("get_entity_live_data called with entity_id=%s", entity_id)
        return await _run(entities.get_entity_live_data, client, entity_id)

    @mcp.tool(
        name="get_entity_schedule",
        description=(
            "Retrieves the operating schedule or calendar data for a specific entity. "
            "Can specify a year and month, or get general schedule data."
        ),
    )
    async def get_entity_schedule(
        entity_id: EntityId,
        year: Annotated[
            Optional[int],
            Field(
                ge=YEAR_MIN,
                le=YEAR_MAX,
                description=(
                    "Optional. The year for the schedule (e.g., 2025). "
                    "If omitted with month, fetches general schedule."
                ),
            ),
        ] = None,
        month: Annotated[
            Optional[int],
            Field(
                ge=1,
                le=12,
                description=(
                    "Optional. The month for the schedule (1-12). "
                    "If omitted with year, fetches general schedule. Requires year if specified."
                ),
            ),
        ] = None,
    ) -> CallToolResult:
        logger.info(
            "get_entity_schedule called with entity_id=%s year=%s month=%s", entity_id, year, month
        )
        return await _run(entities.get_entity_schedule, client, entity_id, year, month)

    @mcp.prompt(name="help", description="Provides a summary of all available tools and their usage.")
    def help_prompt() -> str:
        return get_help_text()

    return mcp


# ---------------------------------------------------------------------------
# Entry point: stdio (default) or streamable HTTP via Uvicorn
# ---------------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> None:
    """Start the ThemeParks MCP server."""
    parser = argparse.ArgumentParser(description=SERVER_DESCRIPTION)
    parser.add_argument("--transport", choices=["stdio", "streamable-http"], default="stdio")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.getLogger().setLevel(args.log_level)

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Failed to start %s: %s", SERVER_NAME, exc)
        sys.exit(1)

    server = create_server(settings)

    if args.transport == "stdio":
        logger.info("%s started, connected via STDIO (API: %s).", SERVER_NAME, settings.base_url)
        server.run("stdio")
        return

    logger.info(
        "Starting %s (streamable-http) on http://%s:%d/mcp …",
        SERVER_NAME,
        args.host,
        args.port,
    )

    # ASGI-App; der MCP-Endpunkt ist /mcp
    uvicorn.run(
        server.streamable_http_app(),
        host=args.host,
        port=args.port,
        reload=False,
        loop="asyncio",
    )


if __name__ == "__main__":
    main()
