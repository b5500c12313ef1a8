"""
Report Tools Registration

Instantiates the report tools and describes them for list_tools.
"""

import logging

from mcp.types import Tool

from trello_reports.service import ReportService

from .base import BaseTool
from .generate_report import GenerateReportTool
from .list_boards import ListBoardsTool

logger = logging.getLogger(__name__)

TOOL_CLASSES: list[type[BaseTool]] = [
    ListBoardsTool,
    GenerateReportTool,
]


def describe_tool(tool_class: type[BaseTool]) -> Tool:
    """Build the MCP tool definition from the decorator metadata."""
    return Tool(
        name=getattr(tool_class, "_mcp_name", tool_class.__name__),
        description=getattr(tool_class, "_mcp_description", ""),
        inputSchema=getattr(tool_class, "_mcp_input_schema", {
            "type": "object",
            "properties": {},
            "additionalProperties": True
        }),
    )


def register_report_tools(
    service: ReportService,
    tool_definitions: dict[str, Tool],
    tool_functions: dict[str, BaseTool],
) -> int:
    """
    Register the report tools.

    Args:
        service: Report service the tools delegate to
        tool_definitions: Filled with name -> Tool for list_tools
        tool_functions: Filled with name -> tool instance for call routing

    Returns:
        Number of tools registered
    """
    for tool_class in TOOL_CLASSES:
        definition = describe_tool(tool_class)
        if definition.name in tool_functions:
            raise ValueError(f"Duplicate tool name: {definition.name}")

        tool_definitions[definition.name] = definition
        tool_functions[definition.name] = tool_class(service)
        logger.info(f"Registered tool: {definition.name}")

    return len(TOOL_CLASSES)
