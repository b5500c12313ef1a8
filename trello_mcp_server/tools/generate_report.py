"""
Generate Report Tool

Generates a quarterly or yearly activity report for a Trello board.
"""

from datetime import datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from trello_reports.service import ReportOptions
from trello_reports.utils.errors import ValidationError

from .base import BaseTool
from .decorators import mcp_tool


@mcp_tool(
    name="generate_report",
    description="Generate a report for a Trello board by quarter or year",
    input_schema={
        "type": "object",
        "properties": {
            "boardId": {
                "type": "string",
                "description": "ID of the Trello board to generate a report for"
            },
            "boardName": {
                "type": "string",
                "description": "Name of the Trello board to generate a report for (alternative to boardId)"
            },
            "period": {
                "type": "object",
                "description": "Reporting period",
                "properties": {
                    "type": {
                        "type": "string",
                        "enum": ["Q1", "Q2", "Q3", "Q4", "year"],
                        "description": "Period type (Q1, Q2, Q3, Q4, or year)"
                    },
                    "year": {
                        "type": "integer",
                        "description": "Year for the report (defaults to current year)"
                    }
                },
                "required": ["type"]
            },
            "format": {
                "type": "string",
                "enum": ["summary", "full"],
                "description": "Report format (summary or full, defaults to full)"
            }
        },
        "required": ["period"]
    }
)
class GenerateReportTool(BaseTool):
    """
    Generate a board report for a quarter or a full year.

    The board is addressed by id or by (partial) name. When the period has
    no year, the current year is used.
    """

    failure_prefix = "Failed to generate report"

    async def execute(
        self,
        boardId: str | None = None,
        boardName: str | None = None,
        period: dict[str, Any] | None = None,
        format: str = "full",
    ) -> tuple[str, dict[str, Any]]:
        if period is not None and period.get("year") is None:
            period = {**period, "year": datetime.now().year}

        try:
            options = ReportOptions(
                boardId=boardId,
                boardName=boardName,
                period=period,
                format=format,
            )
        except PydanticValidationError as e:
            fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
            raise ValidationError(f"Invalid report options: {fields}") from e
        result = await self.service.generate_report(options)
        return result.markdown, result.to_summary()
