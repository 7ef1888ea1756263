"""Entry point for running the rfcuri MCP server as a module."""

import asyncio
import logging
import os
import sys

from rfcuri.core import UriKind


def setup_logging() -> None:
    """Configure logging from RFCURI_LOG_LEVEL."""
    level_name = os.environ.get("RFCURI_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,  # stdout carries the MCP protocol
    )


def check_default_kind() -> str:
    """
    Validate RFCURI_DEFAULT_KIND before the server accepts tool calls.

    Returns:
        The configured kind

    Raises:
        ValueError: If the variable names no known URI kind
    """
    value = os.environ.get("RFCURI_DEFAULT_KIND", UriKind.GENERIC.value)
    known = [kind.value for kind in UriKind]
    if value not in known:
        raise ValueError(f"RFCURI_DEFAULT_KIND must be one of {', '.join(known)}, got '{value}'")
    return value


def main() -> None:
    """Main entry point for the rfcuri MCP server."""
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        kind = check_default_kind()
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(2)

    logger.info("Starting rfcuri MCP server, default URI kind '%s'", kind)

    try:
        from rfcuri.server import run_server

        asyncio.run(run_server())
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.exception("Server error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
