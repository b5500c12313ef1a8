"""
List Boards Tool

Lists the Trello boards of the authenticated member.
"""

from typing import Any

from trello_reports.service import format_boards_as_markdown

from .base import BaseTool
from .decorators import mcp_tool


@mcp_tool(
    name="list_boards",
    description="List all Trello boards accessible to the user",
    input_schema={
        "type": "object",
        "properties": {
            "searchTerm": {
                "type": "string",
                "description": "Optional search term to filter boards by name"
            }
        }
    }
)
class ListBoardsTool(BaseTool):
    """List boards, optionally filtered by a case-insensitive name search."""

    failure_prefix = "Failed to list boards"

    async def execute(self, searchTerm: str | None = None) -> tuple[str, dict[str, Any]]:
        boards = await self.service.list_boards(searchTerm)
        return (
            format_boards_as_markdown(boards),
            {"boards": [board.to_dict() for board in boards]},
        )
