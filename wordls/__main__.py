"""
Main entry point for the word completion language server.

This file is executed when running: python -m wordls

The server communicates with editors via stdin/stdout using JSON-RPC,
or over TCP when asked to.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from wordls import __version__
from wordls.config import ConfigError, find_config
from wordls.utils.log_setup import LOG_LEVELS, resolve_level, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordls",
        description="Frequency-ranked word completion language server",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level for stderr (default: $WORDLS_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML config file (default: ./.wordls.yml if present)",
    )
    parser.add_argument("--tcp", action="store_true", help="Use TCP instead of stdio")
    parser.add_argument("--host", default="127.0.0.1", help="TCP host (default: %(default)s)")
    parser.add_argument("--port", type=int, default=2087, help="TCP port (default: %(default)s)")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Start the language server."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(resolve_level(args.log_level))
    except ValueError as e:
        parser.error(str(e))

    if os.getenv("DEBUG"):
        logger.info("Waiting for debugger to attach on port 5678...")
        try:
            import debugpy  # type: ignore

            debugpy.listen(("127.0.0.1", 5678))
            debugpy.wait_for_client()
        except ImportError:
            logger.error("debugpy not available - install with: pip install wordls[dev]")

    try:
        config = find_config(args.config)
    except ConfigError as e:
        parser.error(str(e))

    # Import server only when actually needed
    from wordls.lsp.server import create_server

    server = create_server(config)

    if args.tcp:
        logger.info("Starting wordls %s on %s:%d", __version__, args.host, args.port)
        server.start_tcp(args.host, args.port)
    else:
        logger.info("Starting wordls %s on stdio", __version__)
        server.start_io()


if __name__ == "__main__":
    main()
