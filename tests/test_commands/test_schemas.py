"""Tests for wire request/response schemas."""

from __future__ import annotations

from deployparams.commands.schemas import (
    DeploymentParameterModel,
    DeploymentParametersRequest,
    DeploymentParametersResponse,
)
from deployparams.constants import ParameterKind
from deployparams.reconciler import DeploymentParameter, ReconciliationResult


class TestRequest:
    def test_validates_camel_case(self) -> None:
        req = DeploymentParametersRequest.model_validate({
            "documentPath": "/a/main.bicep",
            "valuesFilePath": "/a/p.json",
            "templateText": "{}",
        })
        assert req.document_path == "/a/main.bicep"
        assert req.values_file_path == "/a/p.json"
        assert req.template_text == "{}"

    def test_values_file_path_optional(self) -> None:
        req = DeploymentParametersRequest(
            document_path="main.bicep", template_text="{}"
        )
        assert req.values_file_path == ""


class TestResponse:
    def test_wire_field_names(self) -> None:
        result = ReconciliationResult(
            parameters=(
                DeploymentParameter(
                    "a", "x", False, True, ParameterKind.BOOL
                ),
            ),
            values_file_exists=True,
            values_file_name="p.json",
            diagnostic="msg",
        )
        wire = DeploymentParametersResponse.from_result(result).to_wire()
        assert set(wire) == {
            "deploymentParameters",
            "parametersFileExists",
            "parametersFileName",
            "errorMessage",
        }
        assert set(wire["deploymentParameters"][0]) == {  # type: ignore[index]
            "name",
            "value",
            "isMissingParam",
            "isExpression",
            "parameterType",
        }
        assert wire["errorMessage"] == "msg"

    def test_unknown_kind_serializes_as_null(self) -> None:
        model = DeploymentParameterModel.from_parameter(
            DeploymentParameter(
                "cfg", None, True, False, ParameterKind.UNKNOWN
            )
        )
        assert model.model_dump(by_alias=True)["parameterType"] is None

    def test_empty_result(self) -> None:
        result = ReconciliationResult(
            values_file_exists=False,
            values_file_name="main.parameters.json",
        )
        wire = DeploymentParametersResponse.from_result(result).to_wire()
        assert wire["deploymentParameters"] == []
        assert wire["errorMessage"] is None
