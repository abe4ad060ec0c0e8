"""mcp_tools_themeparks package

Purpose:
- Thin, testable client for the read-only ThemeParks.wiki API.
- Expose it via an MCP server (official python-sdk / FastMCP), so an LLM can call tools.

Structure:
- core/: settings, errors, schemas
- services/: API client, tool operations, help text
- mcp/: FastMCP server + tool wiring
"""

__version__ = "1.0.0"

from .core.schemas import EntityRequest, ScheduleRequest, ToolResponse  # noqa: F401,E402
