"""
Trello Reports MCP Server Startup

Usage:
    # Run with stdio transport (for Claude Desktop and other MCP clients)
    trello-reports-mcp

    # Debug logging, mirrored to a JSON log file
    trello-reports-mcp --log-level DEBUG --log-file logs/trello_reports.log

    # Equivalent module invocation
    python -m trello_mcp_server
"""

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from trello_reports.utils.errors import ConfigurationError
from trello_reports.utils.logger import setup_logging

from .config import LOG_LEVELS, TrelloServerConfig
from .server import TrelloMCPServer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Trello Reports MCP Server - quarterly and yearly Trello board reports as MCP tools"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        help="Logging level (default: INFO or LOG_LEVEL env var)"
    )

    parser.add_argument(
        "--log-file",
        default=os.getenv("LOG_FILE"),
        help="Optional JSON log file (default: LOG_FILE env var)"
    )

    return parser.parse_args(argv)


async def serve(config: TrelloServerConfig) -> None:
    server = TrelloMCPServer(config)
    await server.run()


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    load_dotenv()
    args = parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    try:
        config = TrelloServerConfig.from_env()
        config.log_level = args.log_level
        config.log_file = args.log_file

        logger.info("=" * 60)
        logger.info("Trello Reports MCP Server Starting")
        logger.info("=" * 60)
        logger.info(f"Server: {config.server_name} v{config.server_version}")
        logger.info(f"Trello API: {config.credentials.base_url}")
        logger.info(f"Log Level: {args.log_level}")
        logger.info("=" * 60)

        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Shutting down Trello MCP Server...")
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
