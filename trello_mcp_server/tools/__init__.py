"""
MCP tools exposed by the Trello Reports server.
"""

from .base import BaseTool
from .decorators import mcp_tool
from .generate_report import GenerateReportTool
from .list_boards import ListBoardsTool
from .register import TOOL_CLASSES, describe_tool, register_report_tools

__all__ = [
    "BaseTool",
    "mcp_tool",
    "GenerateReportTool",
    "ListBoardsTool",
    "TOOL_CLASSES",
    "describe_tool",
    "register_report_tools",
]
