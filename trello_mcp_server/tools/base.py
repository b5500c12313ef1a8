"""
Base Tool Class

Common invocation, logging and error handling for the report tools.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import TextContent

from trello_reports.service import ReportService
from trello_reports.utils.errors import TrelloReportsError, error_handler

logger = logging.getLogger(__name__)

SENSITIVE_FIELDS = ("password", "api_key", "api_token", "key", "token", "secret")


class BaseTool(ABC):
    """
    Base class for all MCP tools.

    Subclasses implement execute(**kwargs) and return a (markdown, payload)
    pair. The markdown becomes the first text content of the response and the
    payload is serialized as JSON into the second.

    Failures are re-raised as ToolError prefixed with `failure_prefix`; the
    MCP server turns them into an error result for the caller.
    """

    failure_prefix = "Tool failed"

    def __init__(self, service: ReportService):
        """
        Initialize base tool.

        Args:
            service: Report service shared by all tools of the server
        """
        self.service = service

    @abstractmethod
    async def execute(self, **kwargs) -> tuple[str, dict[str, Any]]:
        """
        Execute the tool.

        Returns:
            Markdown text and a JSON-serializable payload
        """

    async def __call__(self, arguments: dict[str, Any]) -> list[TextContent]:
        """
        MCP tool entry point.

        Args:
            arguments: Tool arguments from MCP request

        Returns:
            List of TextContent responses

        Raises:
            ToolError: If the tool fails for any reason
        """
        tool_name = self.__class__.__name__

        logger.info(
            "[%s] Called with arguments: %s",
            tool_name,
            self._sanitize_args_for_log(arguments)
        )

        try:
            markdown, payload = await self.execute(**arguments)
        except TrelloReportsError as e:
            logger.error("[%s] Failed: %s", tool_name, error_handler(e))
            raise ToolError(f"{self.failure_prefix}: {e.message}") from e
        except Exception as e:
            logger.error("[%s] Error: %s", tool_name, str(e), exc_info=True)
            raise ToolError(f"{self.failure_prefix}: {e}") from e

        logger.info("[%s] Completed successfully", tool_name)

        return [
            TextContent(type="text", text=markdown),
            TextContent(type="text", text=self._format_payload(payload)),
        ]

    def _format_payload(self, payload: dict[str, Any]) -> str:
        return json.dumps(payload, indent=2, default=str)

    def _sanitize_args_for_log(self, arguments: dict[str, Any]) -> dict[str, Any]:
        """Copy of the arguments with sensitive fields hidden."""
        sanitized = arguments.copy()
        for field in SENSITIVE_FIELDS:
            if field in sanitized:
                sanitized[field] = "***REDACTED***"
        return sanitized
