"""
Trello Reports MCP Server Implementation

Main server class that registers the report tools and handles MCP protocol
communication over stdio.
"""

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from trello_reports.providers.client import TrelloApiClient
from trello_reports.service import ReportService

from .config import TrelloServerConfig
from .tools import BaseTool, register_report_tools

logger = logging.getLogger(__name__)


class TrelloMCPServer:
    """
    Trello Reports MCP Server

    Exposes board listing and periodic board reports as MCP tools.
    """

    def __init__(
        self,
        config: TrelloServerConfig | None = None,
        client: TrelloApiClient | None = None,
    ):
        """
        Initialize the server.

        Args:
            config: Server configuration. If None, loads from environment.
            client: Optional Trello client (tests inject one with a mock transport)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or TrelloServerConfig.from_env()
        self.config.validate()

        self.server = Server(self.config.server_name, version=self.config.server_version)

        self.client = client or TrelloApiClient(self.config.credentials)
        self.service = ReportService(self.client)

        self._tool_definitions: dict[str, Tool] = {}
        self._tool_functions: dict[str, BaseTool] = {}
        self._register_all_tools()

        logger.info(
            f"Trello MCP Server initialized: {self.config.server_name} v{self.config.server_version}"
        )

    @property
    def tool_names(self) -> list[str]:
        return list(self._tool_definitions)

    def _register_all_tools(self) -> None:
        """Register the tools and the list/call handlers with the MCP server."""
        count = register_report_tools(
            self.service, self._tool_definitions, self._tool_functions
        )
        logger.info(f"Total tools registered: {count}")

        tool_definitions = self._tool_definitions

        @self.server.list_tools()
        async def list_all_tools() -> list[Tool]:
            return list(tool_definitions.values())

        @self.server.call_tool()
        async def route_tool_call(tool_name: str, arguments: dict[str, Any]) -> list[TextContent]:
            return await self.call_tool(tool_name, arguments)

    async def call_tool(self, tool_name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """
        Route a tool call to the registered tool.

        Raises:
            ValueError: If no tool with that name is registered
            ToolError: If the tool fails
        """
        tool = self._tool_functions.get(tool_name)
        if tool is None:
            logger.error(f"[ROUTER] Tool '{tool_name}' not found")
            raise ValueError(
                f"Unknown tool: {tool_name}. Available tools: {', '.join(self.tool_names)}"
            )

        logger.debug(f"[ROUTER] Routing tool call: {tool_name}")
        return await tool(arguments or {})

    async def run_stdio(self) -> None:
        """Run server with stdio transport until the client disconnects."""
        logger.info("Starting Trello MCP Server with stdio transport...")

        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("Trello MCP Server running on stdio")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        """Release the HTTP client."""
        logger.info("Cleaning up Trello MCP Server...")
        await self.client.aclose()
        logger.info("Trello MCP Server stopped")

    async def run(self) -> None:
        await self.run_stdio()
