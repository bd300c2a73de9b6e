"""Request/response schemas for the deployment-parameters command.

Field names on the wire are camelCase and must not change: editor
extensions render directly from this structure.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from deployparams.constants import ParameterKind
from deployparams.reconciler.schemas import (
    DeploymentParameter,
    ReconciliationResult,
)

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class DeploymentParametersRequest(BaseModel):
    """Arguments of the get-deployment-parameters command."""

    model_config = _WIRE_CONFIG

    document_path: str
    values_file_path: str = ""
    template_text: str


class DeploymentParameterModel(BaseModel):
    """One parameter row in the response."""

    model_config = _WIRE_CONFIG

    name: str
    value: str | None = None
    is_missing_param: bool = False
    is_expression: bool = False
    parameter_type: str | None = None

    @classmethod
    def from_parameter(
        cls, parameter: DeploymentParameter
    ) -> DeploymentParameterModel:
        kind = parameter.kind
        return cls(
            name=parameter.name,
            value=parameter.value,
            is_missing_param=parameter.is_missing,
            is_expression=parameter.is_expression,
            parameter_type=(
                None if kind == ParameterKind.UNKNOWN else kind.value
            ),
        )


class DeploymentParametersResponse(BaseModel):
    """Result of the get-deployment-parameters command."""

    model_config = _WIRE_CONFIG

    deployment_parameters: list[DeploymentParameterModel] = Field(
        default_factory=lambda: list[DeploymentParameterModel]()
    )
    parameters_file_exists: bool = False
    parameters_file_name: str
    error_message: str | None = None

    @classmethod
    def from_result(
        cls, result: ReconciliationResult
    ) -> DeploymentParametersResponse:
        return cls(
            deployment_parameters=[
                DeploymentParameterModel.from_parameter(p)
                for p in result.parameters
            ],
            parameters_file_exists=result.values_file_exists,
            parameters_file_name=result.values_file_name,
            error_message=result.diagnostic,
        )

    def to_wire(self) -> dict[str, object]:
        """Dict with camelCase keys, nulls included."""
        return self.model_dump(by_alias=True)
