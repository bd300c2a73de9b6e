"""Tests for process-wide logging setup."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

import deployparams.logging_config as logging_config
from deployparams.logging_config import (
    FASTMCP_LOG_LEVEL_ENV,
    LOG_DATEFMT,
    LOG_FORMAT,
    adopt_fastmcp_loggers,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_steps() -> None:
    logging_config._steps_done.clear()


class TestSetupLogging:
    def test_runs_once(self) -> None:
        with patch(
            "deployparams.logging_config.logging.basicConfig"
        ) as basic_config:
            setup_logging()
            setup_logging("DEBUG")
            basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == "INFO"

    def test_pins_fastmcp_level(self) -> None:
        os.environ.pop(FASTMCP_LOG_LEVEL_ENV, None)
        try:
            setup_logging()
            assert os.environ[FASTMCP_LOG_LEVEL_ENV] == "WARNING"
        finally:
            os.environ.pop(FASTMCP_LOG_LEVEL_ENV, None)

    def test_keeps_user_fastmcp_level(self) -> None:
        os.environ[FASTMCP_LOG_LEVEL_ENV] = "ERROR"
        try:
            setup_logging()
            assert os.environ[FASTMCP_LOG_LEVEL_ENV] == "ERROR"
        finally:
            os.environ.pop(FASTMCP_LOG_LEVEL_ENV, None)

    def test_transport_loggers_quieted(self) -> None:
        setup_logging()
        assert logging.getLogger("fastmcp").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.ERROR

    def test_format_names_the_logger(self) -> None:
        assert "%(name)s" in LOG_FORMAT
        assert "%(levelname)s" in LOG_FORMAT
        assert LOG_DATEFMT


class TestAdoptFastmcpLoggers:
    def test_drops_handler_and_propagates(self) -> None:
        lg = logging.getLogger("fastmcp")
        lg.addHandler(logging.StreamHandler())
        lg.propagate = False

        adopt_fastmcp_loggers()
        assert lg.handlers == []
        assert lg.propagate is True

    def test_runs_once(self) -> None:
        lg = logging.getLogger("fastmcp")
        adopt_fastmcp_loggers()

        handler = logging.StreamHandler()
        lg.addHandler(handler)
        try:
            adopt_fastmcp_loggers()
            assert lg.handlers == [handler]
        finally:
            lg.removeHandler(handler)
