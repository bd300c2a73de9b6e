"""Parameter reconciler: classify declarations into editable parameters."""

from deployparams.reconciler.engine import reconcile
from deployparams.reconciler.schemas import (
    CompiledDefaultEntry,
    DeclaredDefault,
    DeploymentParameter,
    ExpressionDefault,
    LiteralDefault,
    ParameterDeclaration,
    ReconciliationResult,
)

__all__ = [
    "CompiledDefaultEntry",
    "DeclaredDefault",
    "DeploymentParameter",
    "ExpressionDefault",
    "LiteralDefault",
    "ParameterDeclaration",
    "ReconciliationResult",
    "reconcile",
]
