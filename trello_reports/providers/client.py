"""
Trello API client

Async client for the read endpoints used by board reports: boards, lists,
cards, members, labels, board actions and card checklists.
"""

import logging
from typing import Any, Optional

import httpx

from ..utils.errors import UpstreamError
from ..utils.logger import log_api_call
from .config import TrelloCredentials
from .models import (
    DateRange,
    TrelloAction,
    TrelloBoard,
    TrelloCard,
    TrelloChecklist,
    TrelloLabel,
    TrelloList,
    TrelloMember,
    parse_action,
)

logger = logging.getLogger(__name__)

DEFAULT_ACTIONS_LIMIT = 1000


class TrelloApiClient:
    """
    Async client for the Trello REST API.

    Usage:
        async with TrelloApiClient(credentials) as client:
            boards = await client.get_boards()
    """

    def __init__(
        self,
        credentials: TrelloCredentials,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            credentials: API key/token pair and endpoint settings
            transport: Optional httpx transport (tests pass a MockTransport)

        Raises:
            ConfigurationError: If the key or token is missing
        """
        credentials.validate()
        self.credentials = credentials
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "TrelloApiClient":
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get HTTP client, creating one if needed."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.credentials.base_url.rstrip("/"),
                timeout=self.credentials.timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        Make an authenticated GET request.

        Raises:
            UpstreamError: On any transport or HTTP failure
        """
        client = self._get_client()
        query = {**self.credentials.auth_params(), **(params or {})}

        try:
            response = await client.get(path, params=query)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = _remote_message(e.response) or str(e)
            logger.error(f"Trello API returned {status} for {path}: {message}")
            raise UpstreamError(
                f"Trello API error: {message}",
                details={"path": path, "status_code": status},
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Trello API request to {path} failed: {e}")
            raise UpstreamError(
                f"Trello API error: {e}",
                details={"path": path},
            ) from e
        except ValueError as e:
            raise UpstreamError(
                f"Trello API error: invalid JSON response ({e})",
                details={"path": path},
            ) from e

    # ==================== Boards ====================

    @log_api_call
    async def get_boards(self) -> list[TrelloBoard]:
        """Get all boards for the authenticated member"""
        data = await self._get("/members/me/boards")
        return [TrelloBoard.from_api(item) for item in data]

    async def find_board_by_name(self, name: str) -> Optional[TrelloBoard]:
        """
        Find a board by name (case-insensitive partial match).

        The first match in fetch order wins.
        """
        needle = name.lower()
        for board in await self.get_boards():
            if needle in board.name.lower():
                return board
        return None

    @log_api_call
    async def get_board(self, board_id: str) -> TrelloBoard:
        data = await self._get(f"/boards/{board_id}")
        return TrelloBoard.from_api(data)

    # ==================== Board collections ====================

    @log_api_call
    async def get_lists(self, board_id: str) -> list[TrelloList]:
        data = await self._get(f"/boards/{board_id}/lists", {"filter": "all"})
        return [TrelloList.from_api(item) for item in data]

    @log_api_call
    async def get_cards(self, board_id: str) -> list[TrelloCard]:
        data = await self._get(f"/boards/{board_id}/cards", {"filter": "all"})
        return [TrelloCard.from_api(item) for item in data]

    @log_api_call
    async def get_members(self, board_id: str) -> list[TrelloMember]:
        data = await self._get(f"/boards/{board_id}/members")
        return [TrelloMember.from_api(item) for item in data]

    @log_api_call
    async def get_labels(self, board_id: str) -> list[TrelloLabel]:
        data = await self._get(f"/boards/{board_id}/labels")
        return [TrelloLabel.from_api(item) for item in data]

    @log_api_call
    async def get_actions(
        self,
        board_id: str,
        date_range: DateRange,
        limit: int = DEFAULT_ACTIONS_LIMIT,
    ) -> list[TrelloAction]:
        """
        Get board actions within a date range.

        Only a single page of at most `limit` actions is fetched.
        """
        data = await self._get(
            f"/boards/{board_id}/actions",
            {
                "limit": limit,
                "since": date_range.start.isoformat(),
                "before": date_range.end.isoformat(),
                "filter": "all",
            },
        )
        return [parse_action(item) for item in data]

    # ==================== Cards ====================

    @log_api_call
    async def get_card_checklists(self, card_id: str) -> list[TrelloChecklist]:
        data = await self._get(f"/cards/{card_id}/checklists")
        return [TrelloChecklist.from_api(item) for item in data]


def _remote_message(response: httpx.Response) -> str:
    """Extract the error message Trello sent back, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or "")
    return str(body)
