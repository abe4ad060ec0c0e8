"""Entrypoint for running the ThemeParks.wiki MCP server (stdio by default).

Usage:
  THEMEPARKS_API_BASE_URL=https://api.themeparks.wiki/v1 python run_mcp_server.py
  python run_mcp_server.py --transport streamable-http --port 8765

Or via MCP host config (e.g., Claude Desktop) pointing to this script.
"""
from mcp_tools_themeparks.mcp.server import main

if __name__ == "__main__":
    main()
