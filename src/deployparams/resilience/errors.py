"""Error types and classification for structured error handling.

Classifies exceptions by category to enable:
- Structured logging (which failures are the user's input vs internal)
- Informative CLI exit codes and MCP tool errors
"""

from __future__ import annotations

from enum import Enum


class ErrorClass(Enum):
    INPUT_MALFORMED = "input_malformed"  # template or values file won't decode
    FILE_UNREADABLE = "file_unreadable"  # an input file can't be read
    INTERNAL_CONSISTENCY = "internal_consistency"  # compiler guarantee broken
    UNKNOWN = "unknown"  # unclassified


class DeploymentParametersError(Exception):
    """Base class for failures that abort a deployment-parameters command."""

    error_class = ErrorClass.UNKNOWN


class TemplateDecodeError(DeploymentParametersError):
    """Compiled template text is not a JSON object with a parameters map."""

    error_class = ErrorClass.INPUT_MALFORMED


class ValuesFileDecodeError(DeploymentParametersError):
    """Parameters file contents are not a JSON object."""

    error_class = ErrorClass.INPUT_MALFORMED

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid parameters file {path}: {reason}")
        self.path = path


class ValuesFileReadError(DeploymentParametersError):
    """A non-blank parameters file path could not be read."""

    error_class = ErrorClass.FILE_UNREADABLE

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read parameters file {path}: {reason}")
        self.path = path


class SourceReadError(DeploymentParametersError):
    """A Bicep document or compiled template could not be read as text."""

    error_class = ErrorClass.FILE_UNREADABLE

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path


class CompiledDefaultsGapError(DeploymentParametersError):
    """An optional parameter has no default in the compiled template."""

    error_class = ErrorClass.INTERNAL_CONSISTENCY

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Compiled template has no default value for "
            f"optional parameter '{name}'"
        )
        self.name = name


def classify_error(error: Exception) -> ErrorClass:
    """Classify an error to determine how it is reported.

    Checks our own hierarchy first, then falls back to builtin
    types raised by collaborators.
    """
    if isinstance(error, DeploymentParametersError):
        return error.error_class
    if isinstance(error, (UnicodeDecodeError, ValueError)):
        return ErrorClass.INPUT_MALFORMED
    if isinstance(error, OSError):
        return ErrorClass.FILE_UNREADABLE
    return ErrorClass.UNKNOWN


_EXIT_CODES = {
    ErrorClass.INPUT_MALFORMED: 2,
    ErrorClass.FILE_UNREADABLE: 3,
    ErrorClass.INTERNAL_CONSISTENCY: 4,
    ErrorClass.UNKNOWN: 1,
}


def exit_code_for(error: Exception) -> int:
    """Return the CLI exit status for an aborted command."""
    return _EXIT_CODES[classify_error(error)]
