#!/usr/bin/env python3
"""
Entry point for the CHUK Taste MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Read by async_server when it builds the theme registry
THEMES_DIR_ENV = "CHUK_TASTE_THEMES_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Taste MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--themes-dir",
        default=None,
        help="Project theme directory (default: ./themes)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.themes_dir:
        os.environ[THEMES_DIR_ENV] = args.themes_dir

    # Import after argument parsing so the registry sees --themes-dir
    from chuk_mcp_taste.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Taste MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Taste MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
