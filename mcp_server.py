#!/usr/bin/env python3
"""
Weather MCP Server (stdio transport).

Exposes National Weather Service data as two MCP tools:
- get-alerts: active alerts for a US state
- get-forecast: forecast for a latitude/longitude (US locations only)

stdout carries the MCP protocol, so all logging goes to stderr and,
optionally, to a log file.

ENV:
  NWS_API_BASE, NWS_USER_AGENT -> NWS API endpoint and identification
  LOG_LEVEL, WEATHER_LOG_FILE  -> logging
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from config import Config
from tools.tool_registry import register_all_tools

app = FastMCP(Config.SERVER_NAME)
register_all_tools(app)


def configure_logging(level=Config.LOG_LEVEL, log_file=Config.LOG_FILE):
    """Send logs to stderr and, when given, to a log file."""
    detailed_formatter = logging.Formatter(Config.LOG_FORMAT)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(detailed_formatter)
    handlers = [console_handler]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(detailed_formatter)
        handlers.append(file_handler)

    # FastMCP installs its own root handler on construction; replace it.
    logging.basicConfig(level=level.upper(), handlers=handlers, force=True)


async def run_server():
    """Serve the registered tools over stdio until the client disconnects."""
    logging.info(
        "Starting %s MCP server v%s on stdio (%s)",
        Config.SERVER_NAME,
        Config.SERVER_VERSION,
        Config.NWS_API_BASE,
    )
    await app.run_stdio_async()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Weather MCP Server")
    parser.add_argument(
        "--log-level", default=Config.LOG_LEVEL, help="Logging level (default: INFO)"
    )
    parser.add_argument("--log-file", default=Config.LOG_FILE, help="Also log to FILE")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {Config.SERVER_VERSION}"
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        logging.info("Server shutting down...")
    except Exception as e:
        logging.critical("Fatal error in main(): %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
