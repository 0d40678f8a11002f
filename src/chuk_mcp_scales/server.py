#!/usr/bin/env python3
"""
Entry point for the CHUK Scales MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def serve(transport: str, port: int) -> None:
    """Run the server, loading the sound source alongside it."""
    from chuk_mcp_scales.async_server import instrument, mcp

    # Pads work before this finishes; they just light up silently
    loading = asyncio.create_task(instrument.start())
    try:
        if transport == "stdio":
            logger.info("Starting CHUK Scales MCP Server (stdio)")
            await mcp.run_stdio()
        else:
            logger.info(f"Starting CHUK Scales MCP Server (http:{port})")
            await mcp.run_http(port=port)
    finally:
        if not loading.done():
            loading.cancel()
        instrument.stop()


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Scales MCP Server")
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
        "--config",
        help="Instrument config file (default: ./scales.yaml)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Read by async_server at import time
    if args.config:
        os.environ["CHUK_SCALES_CONFIG"] = args.config

    asyncio.run(serve(args.transport, args.port))


if __name__ == "__main__":
    main()
