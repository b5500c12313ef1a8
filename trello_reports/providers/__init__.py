"""
Trello Provider Module

Async client and snapshot models for the Trello REST API.
"""
from .client import TrelloApiClient, DEFAULT_ACTIONS_LIMIT
from .config import TrelloCredentials, TRELLO_API_BASE_URL
from .models import (
    TrelloBoard,
    TrelloList,
    TrelloCard,
    TrelloMember,
    TrelloLabel,
    TrelloChecklist,
    CheckItem,
    EntityRef,
    BaseAction,
    CardCreatedAction,
    CardMovedAction,
    CardUpdatedAction,
    CommentAction,
    GenericAction,
    TrelloAction,
    ReportPeriod,
    DateRange,
    PERIOD_TYPES,
    parse_action,
)

__all__ = [
    "TrelloApiClient",
    "DEFAULT_ACTIONS_LIMIT",
    "TrelloCredentials",
    "TRELLO_API_BASE_URL",
    "TrelloBoard",
    "TrelloList",
    "TrelloCard",
    "TrelloMember",
    "TrelloLabel",
    "TrelloChecklist",
    "CheckItem",
    "EntityRef",
    "BaseAction",
    "CardCreatedAction",
    "CardMovedAction",
    "CardUpdatedAction",
    "CommentAction",
    "GenericAction",
    "TrelloAction",
    "ReportPeriod",
    "DateRange",
    "PERIOD_TYPES",
    "parse_action",
]
