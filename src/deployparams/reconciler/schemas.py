"""Frozen dataclasses for the reconciliation data flow.

Every value here is built fresh per invocation and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from deployparams.constants import ParameterKind
from deployparams.reconciler.kinds import resolve_kind


@dataclass(frozen=True)
class LiteralDefault:
    """A default written as one plain string literal."""

    text: str


@dataclass(frozen=True)
class ExpressionDefault:
    """Any other default: call, ternary, reference, number, object..."""

    text: str


DeclaredDefault = LiteralDefault | ExpressionDefault


@dataclass(frozen=True)
class ParameterDeclaration:
    """A parameter declaration referenced from the template body."""

    name: str
    type_name: str | None = None
    default: DeclaredDefault | None = None

    @property
    def kind(self) -> ParameterKind:
        return resolve_kind(self.type_name)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def default_is_non_literal_expression(self) -> bool:
        return isinstance(self.default, ExpressionDefault)


@dataclass(frozen=True)
class CompiledDefaultEntry:
    """Default value the compiler resolved for one parameter.

    Expression defaults arrive wrapped in one bracket pair
    (``[resourceGroup().location]``); literals arrive as plain text.
    """

    name: str
    raw_default_value: str | None = None


@dataclass(frozen=True)
class DeploymentParameter:
    """One editable (or missing) parameter for the deployment UI."""

    name: str
    value: str | None
    is_missing: bool
    is_expression: bool
    kind: ParameterKind


@dataclass(frozen=True)
class ReconciliationResult:
    """Output of :func:`reconcile`."""

    values_file_exists: bool
    values_file_name: str
    parameters: tuple[DeploymentParameter, ...] = field(
        default_factory=tuple
    )
    diagnostic: str | None = None
