"""Structured JSON logger for command request and error tracking."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from deployparams.constants import ERROR_TRUNCATION_CHARS
from deployparams.logging_config import LOG_DATEFMT, LOG_FORMAT

__all__ = ["CommandLogger", "LOG_FORMAT", "LOG_DATEFMT"]


class CommandLogger:
    """Structured JSON logger with request_id correlation."""

    def __init__(self, log_dir: Path, level: str = "INFO") -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger("deployparams.commands")
        self._logger.setLevel(getattr(logging, level.upper()))
        self._logger.propagate = False

        log_file = (log_dir / "commands.log").resolve()
        for existing in list(self._logger.handlers):
            if (
                isinstance(existing, logging.FileHandler)
                and Path(existing.baseFilename) != log_file
            ):
                self._logger.removeHandler(existing)
                existing.close()

        if not self._logger.handlers:
            handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)

    def log_request(
        self,
        request_id: str,
        document_path: str,
        parameter_count: int,
        values_file_exists: bool,
        has_diagnostic: bool,
        duration_ms: float,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "request",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "document_path": document_path,
                "parameter_count": parameter_count,
                "values_file_exists": values_file_exists,
                "has_diagnostic": has_diagnostic,
                "duration_ms": duration_ms,
            })
        )

    def log_error(
        self,
        request_id: str,
        error_class: str,
        error: str,
    ) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "error_class": error_class,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )
