"""Command surface: request/response schemas and the handler."""

from deployparams.commands.handler import DeploymentParametersHandler
from deployparams.commands.schemas import (
    DeploymentParameterModel,
    DeploymentParametersRequest,
    DeploymentParametersResponse,
)

__all__ = [
    "DeploymentParameterModel",
    "DeploymentParametersHandler",
    "DeploymentParametersRequest",
    "DeploymentParametersResponse",
]
