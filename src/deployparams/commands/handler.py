"""Get-deployment-parameters command: decode inputs, reconcile, respond."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid

from deployparams.analysis.declarations import DeclarationSource
from deployparams.commands.schemas import (
    DeploymentParametersRequest,
    DeploymentParametersResponse,
)
from deployparams.config import Settings
from deployparams.constants import REQUEST_ID_HEX_LENGTH
from deployparams.ingestion.decoders import (
    decode_compiled_defaults,
    decode_provided_values,
)
from deployparams.ingestion.filesystem import FileSystem
from deployparams.logger import CommandLogger
from deployparams.reconciler.engine import reconcile
from deployparams.reconciler.schemas import ParameterDeclaration
from deployparams.resilience.errors import (
    DeploymentParametersError,
    SourceReadError,
    ValuesFileReadError,
    classify_error,
)

logger = logging.getLogger(__name__)


class DeploymentParametersHandler:
    """Transport-neutral handler; the CLI and MCP tool both call it."""

    def __init__(
        self,
        declaration_source: DeclarationSource,
        file_system: FileSystem,
        settings: Settings | None = None,
        command_logger: CommandLogger | None = None,
    ) -> None:
        self._declarations = declaration_source
        self._fs = file_system
        self._settings = settings or Settings()
        self._command_logger = command_logger

    async def handle(
        self, request: DeploymentParametersRequest
    ) -> DeploymentParametersResponse:
        """Run the command once.

        Decode and read failures propagate to the caller as
        :class:`DeploymentParametersError` subclasses; the composite
        diagnostic is returned in-band as ``errorMessage``.
        """
        request_id = uuid.uuid4().hex[:REQUEST_ID_HEX_LENGTH]
        t0 = time.monotonic()
        try:
            response = await self._run(request)
        except DeploymentParametersError as exc:
            error_class = classify_error(exc)
            logger.warning(
                "[request=%s] %s failed (%s): %s",
                request_id,
                request.document_path,
                error_class.value,
                exc,
            )
            if self._command_logger is not None:
                self._command_logger.log_error(
                    request_id, error_class.value, str(exc)
                )
            raise

        duration_ms = (time.monotonic() - t0) * 1000
        logger.info(
            "[request=%s] %s: %d parameter(s) in %.1fms",
            request_id,
            request.document_path,
            len(response.deployment_parameters),
            duration_ms,
        )
        if self._command_logger is not None:
            self._command_logger.log_request(
                request_id=request_id,
                document_path=request.document_path,
                parameter_count=len(response.deployment_parameters),
                values_file_exists=response.parameters_file_exists,
                has_diagnostic=response.error_message is not None,
                duration_ms=duration_ms,
            )
        return response

    async def _run(
        self, request: DeploymentParametersRequest
    ) -> DeploymentParametersResponse:
        provided_values: frozenset[str] | None = None
        if request.values_file_path.strip():
            provided_values = await self._read_values_file(
                request.values_file_path
            )

        compiled_defaults = decode_compiled_defaults(request.template_text)
        declarations = await self._used_parameters(request.document_path)

        result = reconcile(
            declarations,
            compiled_defaults,
            provided_values,
            request.document_path,
            request.values_file_path,
            file_system=self._fs,
            strict=self._settings.strict_compiled_defaults,
            parameters_file_suffix=self._settings.parameters_file_suffix,
        )
        return DeploymentParametersResponse.from_result(result)

    async def _read_values_file(self, path: str) -> frozenset[str]:
        try:
            text = await asyncio.to_thread(self._fs.read_text, path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ValuesFileReadError(path, str(exc)) from exc
        return decode_provided_values(text, path=path)

    async def _used_parameters(
        self, document_path: str
    ) -> list[ParameterDeclaration]:
        try:
            return await asyncio.to_thread(
                self._declarations.used_parameters, document_path
            )
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(document_path, str(exc)) from exc
