"""Reconcile declared parameters with compiled defaults and a values file."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from pathlib import Path

from deployparams.constants import (
    DEFAULT_PARAMETERS_FILE_SUFFIX,
    MISSING_COMPOSITE_MESSAGE,
)
from deployparams.ingestion.filesystem import FileSystem, LocalFileSystem
from deployparams.reconciler.defaults import compiled_default_text
from deployparams.reconciler.kinds import is_composite, resolve_kind
from deployparams.reconciler.schemas import (
    CompiledDefaultEntry,
    DeploymentParameter,
    ParameterDeclaration,
    ReconciliationResult,
)
from deployparams.resilience.errors import CompiledDefaultsGapError

logger = logging.getLogger(__name__)


def reconcile(
    declarations: Iterable[ParameterDeclaration],
    compiled_defaults: Mapping[str, CompiledDefaultEntry],
    provided_values: Collection[str] | None,
    source_document_name: str,
    values_file_path: str,
    *,
    file_system: FileSystem | None = None,
    strict: bool = False,
    parameters_file_suffix: str = DEFAULT_PARAMETERS_FILE_SUFFIX,
) -> ReconciliationResult:
    """Build the list of parameters a user may edit before deploying.

    Walks ``declarations`` once, in order:

    * Required parameters (no default) are emitted as missing unless the
      values file supplies them. Required arrays/objects are never
      emitted; their names are collected into the diagnostic instead.
    * Optional parameters are emitted with their compiled default unless
      they are arrays/objects or the values file supplies them.
      Expression defaults lose their ``[...]`` wrapping.
    * An optional parameter without a compiled default is dropped
      silently, or raises :class:`CompiledDefaultsGapError` when
      ``strict`` is set.

    ``provided_values`` is only membership-tested. Inputs are never
    mutated and identical inputs give identical results.
    """
    fs = file_system if file_system is not None else LocalFileSystem()
    parameters: list[DeploymentParameter] = []
    missing_composites: list[str] = []

    for declaration in declarations:
        name = declaration.name
        kind = resolve_kind(declaration.type_name)
        supplied = provided_values is not None and name in provided_values

        if not declaration.has_default:
            if is_composite(kind):
                if not supplied:
                    missing_composites.append(name)
                continue
            if not supplied:
                parameters.append(
                    DeploymentParameter(
                        name=name,
                        value=None,
                        is_missing=True,
                        is_expression=False,
                        kind=kind,
                    )
                )
            continue

        # Composite defaults are used as-is; a file value always wins.
        if is_composite(kind) or supplied:
            continue

        is_expression = declaration.default_is_non_literal_expression
        value = compiled_default_text(
            compiled_defaults, name, is_expression=is_expression
        )
        if value is None:
            if strict:
                raise CompiledDefaultsGapError(name)
            logger.debug(
                "No compiled default for optional parameter %s; skipped",
                name,
            )
            continue

        parameters.append(
            DeploymentParameter(
                name=name,
                value=value,
                is_missing=False,
                is_expression=is_expression,
                kind=kind,
            )
        )

    values_file_exists = bool(values_file_path.strip()) and fs.exists(
        values_file_path
    )

    return ReconciliationResult(
        parameters=tuple(parameters),
        values_file_exists=values_file_exists,
        values_file_name=parameters_file_name(
            source_document_name,
            values_file_path,
            values_file_exists=values_file_exists,
            suffix=parameters_file_suffix,
        ),
        diagnostic=missing_composite_message(missing_composites),
    )


def parameters_file_name(
    source_document_name: str,
    values_file_path: str,
    *,
    values_file_exists: bool,
    suffix: str = DEFAULT_PARAMETERS_FILE_SUFFIX,
) -> str:
    """Name of the supplied values file, or the conventional one."""
    if values_file_exists:
        return Path(values_file_path).name
    return Path(source_document_name).stem + suffix


def missing_composite_message(names: list[str]) -> str | None:
    """Single diagnostic naming every required array/object parameter."""
    if not names:
        return None
    return MISSING_COMPOSITE_MESSAGE + ",".join(names)
