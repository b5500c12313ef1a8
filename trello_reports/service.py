"""
Trello Reports Service.

Entry point for the two operations exposed to clients: listing boards and
generating a periodic board report. All Trello access goes through the
TrelloApiClient handed to the service.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .analytics.calculators.activity import BoardActivityCalculator
from .analytics.calculators.cards import TOP_CARDS_LIMIT
from .analytics.models import BoardActivity
from .analytics.period import format_date, resolve_date_range, validate_period
from .providers.client import TrelloApiClient
from .providers.models import (
    DateRange,
    ReportPeriod,
    TrelloAction,
    TrelloBoard,
    TrelloCard,
    TrelloChecklist,
    TrelloLabel,
    TrelloList,
    TrelloMember,
)
from .reports import ReportData, render_full_report, render_summary_report
from .utils.errors import (
    NotFoundError,
    PartialFetchWarning,
    UpstreamError,
    ValidationError,
)

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("summary", "full")


# ==================== Request Models ====================

class ReportPeriodModel(BaseModel):
    """Reporting period as sent by clients."""
    type: Optional[str] = None
    year: Optional[int] = None

    def to_period(self) -> ReportPeriod:
        return ReportPeriod(type=self.type, year=self.year)


class ReportOptions(BaseModel):
    """Options for generate_report."""
    model_config = ConfigDict(populate_by_name=True)

    board_id: Optional[str] = Field(default=None, alias="boardId")
    board_name: Optional[str] = Field(default=None, alias="boardName")
    period: Optional[ReportPeriodModel] = None
    format: Optional[str] = "full"


# ==================== Results ====================

@dataclass
class ReportResult:
    """Everything fetched and derived for one report, plus the rendered markdown."""
    board: TrelloBoard
    period: ReportPeriod
    date_range: DateRange
    lists: List[TrelloList]
    cards: List[TrelloCard]
    members: List[TrelloMember]
    labels: List[TrelloLabel]
    actions: List[TrelloAction]
    activity: BoardActivity
    markdown: str

    def to_summary(self) -> Dict[str, Any]:
        """Structured payload returned next to the markdown."""
        return {
            "boardInfo": self.board.to_dict(),
            "period": self.period.to_dict(),
            "dateRange": self.date_range.to_dict(),
        }


def format_boards_as_markdown(boards: Sequence[TrelloBoard]) -> str:
    """Render boards as a markdown table, or a notice when there are none."""
    if not boards:
        return "No boards found."

    lines = [
        "# Trello Boards",
        "",
        "| Board Name | ID | Last Activity |",
        "|------------|----|--------------|",
    ]
    for board in boards:
        last_activity = (
            format_date(board.date_last_activity) if board.date_last_activity else "Unknown"
        )
        lines.append(f"| {board.name} | {board.id} | {last_activity} |")
    lines.extend(["", f"*Total: {len(boards)} boards*", ""])
    return "\n".join(lines)


class ReportService:
    """
    Board listing and report generation on top of a Trello client.

    The service keeps no state between calls; every report is built from a
    fresh set of fetches.
    """

    def __init__(self, client: TrelloApiClient):
        self.client = client

    async def list_boards(self, search_term: Optional[str] = None) -> List[TrelloBoard]:
        """
        List boards of the authenticated member.

        Args:
            search_term: Optional case-insensitive substring of the board name

        Returns:
            Boards in Trello's order, filtered when a search term is given
        """
        boards = await self.client.get_boards()
        if search_term:
            needle = search_term.lower()
            boards = [board for board in boards if needle in board.name.lower()]
        logger.info(f"Listed {len(boards)} boards (search_term={search_term!r})")
        return boards

    async def generate_report(
        self,
        options: ReportOptions,
        now: Optional[datetime] = None,
    ) -> ReportResult:
        """
        Generate a quarterly or yearly report for a board.

        Args:
            options: Board reference, period and output format
            now: Timestamp for the "generated on" line

        Returns:
            ReportResult with the fetched collections, aggregate and markdown

        Raises:
            ValidationError: Missing or unknown period, unknown format or no board reference
            NotFoundError: No board name matches options.board_name
            UpstreamError: A required Trello request failed
        """
        period = validate_period(options.period.to_period() if options.period else None)

        report_format = options.format or "full"
        if report_format not in REPORT_FORMATS:
            raise ValidationError("Invalid format specified. Must be 'summary' or 'full'.")

        board_id = await self._resolve_board_id(options)
        date_range = resolve_date_range(period)

        logger.info(
            f"Generating {report_format} report for board {board_id} "
            f"({period.type} {period.year})"
        )

        board = await self.client.get_board(board_id)
        lists = await self.client.get_lists(board_id)
        cards = await self.client.get_cards(board_id)
        members = await self.client.get_members(board_id)
        labels = await self.client.get_labels(board_id)
        actions = await self.client.get_actions(board_id, date_range)

        activity = BoardActivityCalculator.calculate(lists, cards, labels, actions)
        activity = activity.with_checklists(await self._fetch_checklists(activity.top_cards))

        data = ReportData(
            board=board,
            period=period,
            date_range=date_range,
            lists=lists,
            cards=cards,
            members=members,
            labels=labels,
            actions=actions,
            activity=activity,
        )
        if report_format == "summary":
            markdown = render_summary_report(data, now)
        else:
            markdown = render_full_report(data, now)

        return ReportResult(
            board=board,
            period=period,
            date_range=date_range,
            lists=lists,
            cards=cards,
            members=members,
            labels=labels,
            actions=actions,
            activity=activity,
            markdown=markdown,
        )

    async def _resolve_board_id(self, options: ReportOptions) -> str:
        if options.board_id:
            return options.board_id

        if options.board_name:
            board = await self.client.find_board_by_name(options.board_name)
            if board is None:
                raise NotFoundError(
                    f'Board with name "{options.board_name}" not found.',
                    details={"board_name": options.board_name},
                )
            return board.id

        raise ValidationError("Either boardId or boardName must be provided.")

    async def _fetch_checklists(
        self, top_cards: Sequence[TrelloCard]
    ) -> Dict[str, List[TrelloChecklist]]:
        """Fetch checklists of the top cards; a failing card is logged and skipped."""
        checklists: Dict[str, List[TrelloChecklist]] = {}
        for card in top_cards[:TOP_CARDS_LIMIT]:
            try:
                checklists[card.id] = await self.client.get_card_checklists(card.id)
            except UpstreamError as e:
                warning = PartialFetchWarning(
                    f"Could not fetch checklists for card {card.id}: {e.message}",
                    details={"card_id": card.id},
                )
                logger.warning(f"{warning.message} [{warning.error_code.value}]")
        return checklists
