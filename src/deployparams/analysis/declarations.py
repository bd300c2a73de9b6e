"""Declaration sources: the parameters a template body actually uses."""

from __future__ import annotations

import logging
from typing import Protocol

from deployparams.analysis.bicep_scanner import scan_source
from deployparams.ingestion.filesystem import FileSystem
from deployparams.reconciler.schemas import ParameterDeclaration

logger = logging.getLogger(__name__)


class DeclarationSource(Protocol):
    def used_parameters(
        self, document_path: str
    ) -> list[ParameterDeclaration]: ...


class BicepDeclarationSource:
    """Reads a Bicep file and returns its referenced ``param`` declarations."""

    def __init__(self, file_system: FileSystem) -> None:
        self._fs = file_system

    def used_parameters(
        self, document_path: str
    ) -> list[ParameterDeclaration]:
        """Declarations referenced elsewhere in the file, in source order.

        A document that does not exist has no declarations.
        """
        if not self._fs.exists(document_path):
            logger.warning(
                "Template %s not found; no parameters to reconcile",
                document_path,
            )
            return []

        scanned = scan_source(self._fs.read_text(document_path))
        unused = [p.declaration.name for p in scanned if not p.is_used]
        if unused:
            logger.debug(
                "Skipping unreferenced parameters in %s: %s",
                document_path,
                ", ".join(unused),
            )
        return [p.declaration for p in scanned if p.is_used]
