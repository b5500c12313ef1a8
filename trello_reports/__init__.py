"""
Trello Reports

Fetches a Trello board's lists, cards, members, labels and actions, derives
activity metrics for a quarter or year, and renders markdown reports.
"""

from .providers import TrelloApiClient, TrelloCredentials
from .service import (
    ReportOptions,
    ReportPeriodModel,
    ReportResult,
    ReportService,
    format_boards_as_markdown,
)

__all__ = [
    "TrelloApiClient",
    "TrelloCredentials",
    "ReportOptions",
    "ReportPeriodModel",
    "ReportResult",
    "ReportService",
    "format_boards_as_markdown",
]

__version__ = "1.0.0"
