"""Map declared type keywords to parameter kinds."""

from __future__ import annotations

from deployparams.constants import (
    COMPOSITE_KINDS,
    TYPE_KEYWORDS,
    ParameterKind,
)


def resolve_kind(type_name: str | None) -> ParameterKind:
    """Return the kind for a type keyword; unknown or absent → UNKNOWN."""
    if type_name is None:
        return ParameterKind.UNKNOWN
    return TYPE_KEYWORDS.get(type_name, ParameterKind.UNKNOWN)


def is_composite(kind: ParameterKind) -> bool:
    """True for array and object kinds."""
    return kind in COMPOSITE_KINDS
