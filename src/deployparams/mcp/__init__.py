"""MCP server exposing the deployment-parameters command."""

from deployparams.mcp.server import configure, get_handler, mcp

__all__ = ["configure", "get_handler", "mcp"]
