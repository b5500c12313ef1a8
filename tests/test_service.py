"""
Unit tests for the report service
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from trello_reports.providers.client import TrelloApiClient
from trello_reports.providers.models import TrelloBoard, TrelloChecklist
from trello_reports.service import (
    ReportOptions,
    ReportService,
    format_boards_as_markdown,
)
from trello_reports.utils.errors import NotFoundError, UpstreamError, ValidationError

NOW = datetime(2024, 4, 2, 9, 0)


@pytest.fixture
def mock_client(board, lists, cards, members, labels, actions):
    """Create a mock TrelloApiClient serving the sample board."""
    client = MagicMock(spec=TrelloApiClient)
    client.get_boards = AsyncMock(return_value=[board])
    client.find_board_by_name = AsyncMock(return_value=board)
    client.get_board = AsyncMock(return_value=board)
    client.get_lists = AsyncMock(return_value=lists)
    client.get_cards = AsyncMock(return_value=cards)
    client.get_members = AsyncMock(return_value=members)
    client.get_labels = AsyncMock(return_value=labels)
    client.get_actions = AsyncMock(return_value=actions)
    client.get_card_checklists = AsyncMock(return_value=[])
    return client


@pytest.fixture
def service(mock_client):
    return ReportService(mock_client)


def options(**kwargs):
    kwargs.setdefault("period", {"type": "Q1", "year": 2024})
    return ReportOptions(**kwargs)


class TestListBoards:
    """Tests for ReportService.list_boards."""

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_and_keeps_order(self, service, mock_client):
        mock_client.get_boards.return_value = [
            TrelloBoard(id="b1", name="Project Alpha"),
            TrelloBoard(id="b2", name="Marketing"),
            TrelloBoard(id="b3", name="project X"),
        ]

        boards = await service.list_boards("proj")

        assert [board.name for board in boards] == ["Project Alpha", "project X"]

    @pytest.mark.asyncio
    async def test_without_search_term_returns_all(self, service, board):
        assert await service.list_boards() == [board]

    def test_markdown_table(self, board):
        markdown = format_boards_as_markdown([board])

        assert markdown.startswith("# Trello Boards\n\n")
        assert "| Board Name | ID | Last Activity |" in markdown
        assert "| Project Alpha | board1 | 2024-03-28 |" in markdown
        assert "*Total: 1 boards*" in markdown

    def test_markdown_when_empty(self):
        assert format_boards_as_markdown([]) == "No boards found."


class TestGenerateReportValidation:
    """Tests for argument validation in ReportService.generate_report."""

    @pytest.mark.asyncio
    async def test_missing_period(self, service, mock_client):
        with pytest.raises(ValidationError, match="Invalid period specified"):
            await service.generate_report(ReportOptions(boardId="board1"))

        mock_client.get_board.assert_not_called()

    @pytest.mark.asyncio
    async def test_period_without_year(self, service):
        with pytest.raises(ValidationError, match="Must include type and year"):
            await service.generate_report(options(boardId="board1", period={"type": "Q1"}))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "period,message",
        [
            ({"type": "Q7", "year": 2024}, "Invalid period type 'Q7'"),
            ({"type": "Q1", "year": 1969}, "Invalid period year 1969"),
        ],
    )
    async def test_unknown_period_rejected_before_fetching(self, service, mock_client, period, message):
        with pytest.raises(ValidationError, match=message):
            await service.generate_report(options(boardId="board1", period=period))

        mock_client.get_board.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_format(self, service):
        with pytest.raises(ValidationError) as exc_info:
            await service.generate_report(options(boardId="board1", format="pdf"))

        assert exc_info.value.message == "Invalid format specified. Must be 'summary' or 'full'."

    @pytest.mark.asyncio
    async def test_period_checked_before_format(self, service):
        with pytest.raises(ValidationError, match="Invalid period specified"):
            await service.generate_report(ReportOptions(boardId="board1", format="pdf"))

    @pytest.mark.asyncio
    async def test_no_board_reference(self, service, mock_client):
        with pytest.raises(ValidationError) as exc_info:
            await service.generate_report(options())

        assert exc_info.value.message == "Either boardId or boardName must be provided."
        mock_client.find_board_by_name.assert_not_called()

    @pytest.mark.asyncio
    async def test_board_name_not_found(self, service, mock_client):
        mock_client.find_board_by_name.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.generate_report(options(boardName="Finance"))

        assert exc_info.value.message == 'Board with name "Finance" not found.'
        mock_client.get_board.assert_not_called()


class TestGenerateReport:
    """Tests for the report pipeline."""

    @pytest.mark.asyncio
    async def test_full_report_by_id(self, service, mock_client, date_range):
        result = await service.generate_report(options(boardId="board1"), now=NOW)

        mock_client.get_board.assert_awaited_once_with("board1")
        mock_client.get_actions.assert_awaited_once_with("board1", date_range)
        assert result.date_range == date_range
        assert result.activity.cards_moved == 4
        assert result.markdown.startswith("# Trello Board Report: Project Alpha")
        assert "*Report generated on 2024-04-02*" in result.markdown

    @pytest.mark.asyncio
    async def test_board_resolved_by_name(self, service, mock_client):
        await service.generate_report(options(boardName="alpha", format="summary"), now=NOW)

        mock_client.find_board_by_name.assert_awaited_once_with("alpha")
        mock_client.get_lists.assert_awaited_once_with("board1")

    @pytest.mark.asyncio
    async def test_board_id_wins_over_name(self, service, mock_client):
        await service.generate_report(options(boardId="board1", boardName="other"), now=NOW)

        mock_client.find_board_by_name.assert_not_called()

    @pytest.mark.asyncio
    async def test_summary_format(self, service):
        result = await service.generate_report(options(boardId="board1", format="summary"), now=NOW)

        assert result.markdown.startswith("# Project Alpha - First Quarter 2024 Summary")

    @pytest.mark.asyncio
    async def test_checklists_fetched_for_top_cards(self, service, mock_client):
        mock_client.get_card_checklists.return_value = [TrelloChecklist(id="cl1", id_card="c1")]

        result = await service.generate_report(options(boardId="board1"), now=NOW)

        fetched = [call.args[0] for call in mock_client.get_card_checklists.await_args_list]
        assert fetched == ["c1", "c3", "c2", "c4"]
        assert set(result.activity.card_checklists) == {"c1", "c3", "c2", "c4"}

    @pytest.mark.asyncio
    async def test_checklist_failure_is_skipped(self, service, mock_client, caplog):
        async def checklists(card_id):
            if card_id == "c3":
                raise UpstreamError("Trello API error: boom")
            return []

        mock_client.get_card_checklists.side_effect = checklists

        result = await service.generate_report(options(boardId="board1"), now=NOW)

        assert "c3" not in result.activity.card_checklists
        assert "c2" in result.activity.card_checklists
        assert "Could not fetch checklists for card c3" in caplog.text

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self, service, mock_client):
        mock_client.get_cards.side_effect = UpstreamError("Trello API error: timeout")

        with pytest.raises(UpstreamError):
            await service.generate_report(options(boardId="board1"))

    @pytest.mark.asyncio
    async def test_to_summary(self, service):
        result = await service.generate_report(options(boardId="board1"), now=NOW)

        summary = result.to_summary()
        assert summary["boardInfo"]["name"] == "Project Alpha"
        assert summary["period"] == {"type": "Q1", "year": 2024}
        assert summary["dateRange"] == {
            "start": "2024-01-01T00:00:00",
            "end": "2024-03-31T23:59:59",
        }
