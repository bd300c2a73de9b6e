"""MCP server: FastMCP instance with configure/run helpers."""

from __future__ import annotations

from fastmcp import FastMCP

from deployparams import __version__
from deployparams.commands.handler import DeploymentParametersHandler
from deployparams.mcp.tools import register_tools

mcp = FastMCP(
    name="deployparams",
    version=__version__,
    instructions=(
        "Lists the parameters of a Bicep template that can be "
        "edited before deployment"
    ),
)

_handler: DeploymentParametersHandler | None = None

register_tools(mcp)


def configure(handler: DeploymentParametersHandler) -> None:
    """Set the command handler used by MCP tools.

    Must be called before serving requests.
    """
    global _handler  # noqa: PLW0603
    _handler = handler


def get_handler() -> DeploymentParametersHandler:
    """Get the configured command handler."""
    if _handler is None:
        msg = (
            "MCP server not configured. "
            "Call configure(handler) first."
        )
        raise RuntimeError(msg)
    return _handler
