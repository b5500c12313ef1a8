"""
Tool Decorators

Decorator for MCP tool registration.
"""

from typing import Any


def mcp_tool(name: str, description: str, input_schema: dict[str, Any] | None = None):
    """
    Decorator for MCP tool registration.

    Adds metadata to a tool class; register_report_tools reads it when
    building the advertised tool list.

    Usage:
        @mcp_tool(
            name="list_boards",
            description="List all Trello boards",
            input_schema={
                "type": "object",
                "properties": {
                    "searchTerm": {"type": "string"}
                }
            }
        )
        class ListBoardsTool(BaseTool):
            async def execute(self, searchTerm: str | None = None):
                ...

    Args:
        name: Tool name (must be unique)
        description: Tool description for AI agents
        input_schema: JSON schema for tool input (optional)

    Returns:
        Decorated class
    """
    def decorator(cls):
        cls._mcp_name = name
        cls._mcp_description = description
        cls._mcp_input_schema = input_schema or {
            "type": "object",
            "properties": {},
            "additionalProperties": True
        }
        return cls
    return decorator
