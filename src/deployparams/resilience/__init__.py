"""Error taxonomy shared by the command surfaces."""

from deployparams.resilience.errors import (
    CompiledDefaultsGapError,
    DeploymentParametersError,
    ErrorClass,
    SourceReadError,
    TemplateDecodeError,
    ValuesFileDecodeError,
    ValuesFileReadError,
    classify_error,
    exit_code_for,
)

__all__ = [
    "CompiledDefaultsGapError",
    "DeploymentParametersError",
    "ErrorClass",
    "SourceReadError",
    "TemplateDecodeError",
    "ValuesFileDecodeError",
    "ValuesFileReadError",
    "classify_error",
    "exit_code_for",
]
