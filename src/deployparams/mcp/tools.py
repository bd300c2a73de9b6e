"""MCP tool definitions."""

# pyright: reportUnusedFunction=false
# All functions are registered via @mcp.tool decorator

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from deployparams.commands.schemas import DeploymentParametersRequest
from deployparams.resilience.errors import (
    DeploymentParametersError,
    classify_error,
)


def register_tools(mcp: FastMCP) -> None:
    """Register the deployment-parameters tool."""

    @mcp.tool()
    async def get_deployment_parameters(
        document_path: str,
        template: str,
        parameters_file_path: str = "",
    ) -> dict[str, Any]:
        """List the template parameters a user may edit before deploying.

        ``template`` is the compiled ARM JSON for the Bicep file at
        ``document_path``. Parameters supplied by the optional
        parameters file are left out. Array and object parameters
        without a default are reported in ``errorMessage``.
        """
        from deployparams.mcp.server import get_handler

        request = DeploymentParametersRequest(
            document_path=document_path,
            values_file_path=parameters_file_path,
            template_text=template,
        )
        try:
            response = await get_handler().handle(request)
        except DeploymentParametersError as exc:
            msg = f"{classify_error(exc).value}: {exc}"
            raise ToolError(msg) from exc
        return response.to_wire()
