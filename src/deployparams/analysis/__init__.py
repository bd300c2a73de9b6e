"""Template analysis: locate parameter declarations and their usage."""

from deployparams.analysis.bicep_scanner import (
    ScannedParameter,
    classify_default,
    scan_source,
)
from deployparams.analysis.declarations import (
    BicepDeclarationSource,
    DeclarationSource,
)

__all__ = [
    "BicepDeclarationSource",
    "DeclarationSource",
    "ScannedParameter",
    "classify_default",
    "scan_source",
]
