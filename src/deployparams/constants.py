"""Shared constants: single source of truth for cross-module values.

StrEnum members are str-compatible, so the kind names serialize into
JSON responses unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class ParameterKind(StrEnum):
    """Primitive kind of a declared template parameter."""

    ARRAY = "Array"
    BOOL = "Bool"
    INT = "Int"
    OBJECT = "Object"
    STRING = "String"
    UNKNOWN = "Unknown"


# ── Type mapping ─────────────────────────────────────────

# Declared type keyword → kind. Anything else resolves to UNKNOWN.
TYPE_KEYWORDS: dict[str, ParameterKind] = {
    "array": ParameterKind.ARRAY,
    "bool": ParameterKind.BOOL,
    "int": ParameterKind.INT,
    "object": ParameterKind.OBJECT,
    "string": ParameterKind.STRING,
}

# Kinds that are never surfaced as editable fields
COMPOSITE_KINDS: frozenset[ParameterKind] = frozenset({
    ParameterKind.ARRAY,
    ParameterKind.OBJECT,
})

# ── Compiled template layout ─────────────────────────────

TEMPLATE_PARAMETERS_KEY = "parameters"
TEMPLATE_DEFAULT_VALUE_KEY = "defaultValue"

# Keys that mark a document as a deployment parameters envelope
PARAMETERS_ENVELOPE_MARKERS: tuple[str, ...] = ("$schema", "contentVersion")

EXPRESSION_OPEN = "["
EXPRESSION_CLOSE = "]"

# ── Output naming ────────────────────────────────────────

DEFAULT_PARAMETERS_FILE_SUFFIX = ".parameters.json"
COMPILED_TEMPLATE_SUFFIX = ".json"

MISSING_COMPOSITE_MESSAGE = (
    "Parameters of type array or object should either contain a "
    "default value or must be specified in parameters.json file. "
    "Please update the value for following parameters: "
)

# ── Logging ──────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 500
REQUEST_ID_HEX_LENGTH = 12
