"""Process-wide logging for the CLI and the MCP server.

fastmcp owns a ``fastmcp`` logger: its level comes from the
``FASTMCP_LOG_LEVEL`` environment variable, read when the package is
imported, and it gets a rich console handler that does not propagate.
To keep every record on stderr in one format, setup is split around
that import:

1. ``setup_logging`` runs first: it pins fastmcp's level through the
   environment and configures the root logger.
2. ``adopt_fastmcp_loggers`` runs once fastmcp is imported: it drops
   fastmcp's handler so its records reach the root handler.

Each step takes effect once per process.
"""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

FASTMCP_LOG_LEVEL_ENV = "FASTMCP_LOG_LEVEL"

# fastmcp and the transports underneath it
_QUIET_LOGGERS = {
    "fastmcp": logging.WARNING,
    "mcp": logging.WARNING,
    "httpx": logging.WARNING,
    "uvicorn": logging.WARNING,
    "uvicorn.access": logging.ERROR,  # one line per SSE request
}

_steps_done: set[str] = set()


def _first_time(step: str) -> bool:
    if step in _steps_done:
        return False
    _steps_done.add(step)
    return True


def setup_logging(level: str = "INFO") -> None:
    """Send root records to stderr; call before fastmcp is imported.

    stdout is reserved for the CLI's JSON and the stdio MCP transport.
    """
    if not _first_time("root"):
        return

    os.environ.setdefault(FASTMCP_LOG_LEVEL_ENV, "WARNING")
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def adopt_fastmcp_loggers() -> None:
    """Route fastmcp's records through the root handler."""
    if not _first_time("fastmcp"):
        return

    fastmcp_logger = logging.getLogger("fastmcp")
    for handler in list(fastmcp_logger.handlers):
        fastmcp_logger.removeHandler(handler)
    fastmcp_logger.propagate = True
