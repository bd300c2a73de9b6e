"""CLI entry point: ``deployparams params`` and ``deployparams mcp``."""

from __future__ import annotations

# Root logging first: importing fastmcp reads FASTMCP_LOG_LEVEL
from deployparams.logging_config import setup_logging

setup_logging("WARNING")

import argparse  # noqa: E402
import asyncio  # noqa: E402
import json  # noqa: E402
import logging  # noqa: E402
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

from deployparams import __version__  # noqa: E402
from deployparams.analysis.declarations import (  # noqa: E402
    BicepDeclarationSource,
)
from deployparams.commands.handler import (  # noqa: E402
    DeploymentParametersHandler,
)
from deployparams.commands.schemas import (  # noqa: E402
    DeploymentParametersRequest,
)
from deployparams.config import Settings  # noqa: E402
from deployparams.constants import COMPILED_TEMPLATE_SUFFIX  # noqa: E402
from deployparams.ingestion.filesystem import LocalFileSystem  # noqa: E402
from deployparams.logger import CommandLogger  # noqa: E402
from deployparams.logging_config import (  # noqa: E402
    adopt_fastmcp_loggers,
)
from deployparams.mcp import configure, mcp  # noqa: E402
from deployparams.resilience.errors import (  # noqa: E402
    DeploymentParametersError,
    SourceReadError,
    exit_code_for,
)

# fastmcp is imported by now
adopt_fastmcp_loggers()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"deployparams {__version__}")
        return

    if args.command == "params":
        _run_params(args)
    elif args.command == "mcp":
        _run_mcp(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="deployparams",
        description=(
            "List the Bicep template parameters that can be "
            "edited before deployment."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    params = sub.add_parser(
        "params",
        help="Reconcile template parameters",
    )
    params.add_argument(
        "document_path",
        type=str,
        help="Path to the Bicep file",
    )
    params.add_argument(
        "--template",
        "-t",
        default=None,
        help=(
            "Compiled ARM template JSON "
            "(default: <document>.json next to the Bicep file)"
        ),
    )
    params.add_argument(
        "--parameters-file",
        "-p",
        default="",
        help="Deployment parameters file (optional)",
    )
    params.add_argument(
        "--strict",
        action="store_true",
        help=(
            "Fail when an optional parameter has no "
            "compiled default"
        ),
    )
    params.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent for the response (default: 2)",
    )
    params.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    mcp_parser = sub.add_parser(
        "mcp",
        help="Start MCP server",
    )
    mcp_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    mcp_parser.add_argument(
        "--host",
        default=None,
        help="Bind address for SSE transport (default: from settings)",
    )
    mcp_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from settings)",
    )

    return parser


def _build_handler(
    settings: Settings,
    command_logger: CommandLogger | None = None,
) -> DeploymentParametersHandler:
    fs = LocalFileSystem(encoding=settings.source_encoding)
    return DeploymentParametersHandler(
        declaration_source=BicepDeclarationSource(fs),
        file_system=fs,
        settings=settings,
        command_logger=command_logger,
    )


def _run_params(args: argparse.Namespace) -> None:
    """Execute the params command and print the JSON response."""
    if args.verbose:
        logging.getLogger("deployparams").setLevel(logging.DEBUG)

    document_path = Path(args.document_path)
    template_path = (
        Path(args.template)
        if args.template
        else document_path.with_suffix(COMPILED_TEMPLATE_SUFFIX)
    )
    if not template_path.is_file():
        print(
            f"Error: compiled template not found: {template_path}",
            file=sys.stderr,
        )
        sys.exit(1)

    settings = Settings()
    if args.strict:
        settings = settings.model_copy(
            update={"strict_compiled_defaults": True}
        )

    try:
        template_text = template_path.read_text(
            encoding=settings.source_encoding
        )
    except (OSError, UnicodeDecodeError) as exc:
        err = SourceReadError(str(template_path), str(exc))
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(exit_code_for(err))

    request = DeploymentParametersRequest(
        document_path=str(document_path),
        values_file_path=args.parameters_file,
        template_text=template_text,
    )

    try:
        response = asyncio.run(_build_handler(settings).handle(request))
    except DeploymentParametersError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(exit_code_for(exc))

    print(json.dumps(response.to_wire(), indent=args.indent or None))


def _run_mcp(args: argparse.Namespace) -> None:
    """Start the MCP server."""
    settings = Settings()
    logging.getLogger("deployparams").setLevel(settings.log_level)

    command_logger = (
        CommandLogger(settings.log_dir, level=settings.log_level)
        if settings.debug_mode
        else None
    )
    configure(_build_handler(settings, command_logger))

    if args.transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport="sse",
            host=args.host or settings.mcp_host,
            port=args.port or settings.mcp_port,
        )


if __name__ == "__main__":
    main()
