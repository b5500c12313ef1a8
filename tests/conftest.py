"""
Pytest configuration and fixtures for all tests.

Fixtures describe one small board as raw Trello API payloads and as parsed
models:

    Lists:   To Do, Doing, Review, Done
    Cards:   c1 "Login page" (Done), c2 "Fix crash" (Done),
             c3 "Search" (Doing), c4 "Docs" (To Do), c5 "Untouched" (Review)
    Actions: 2 creations, 4 list moves, 2 comments, 1 plain update
"""

import sys
from pathlib import Path
from typing import Any

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from trello_reports.analytics.calculators.activity import BoardActivityCalculator
from trello_reports.providers.models import (
    DateRange,
    ReportPeriod,
    TrelloBoard,
    TrelloCard,
    TrelloLabel,
    TrelloList,
    TrelloMember,
    parse_action,
)
from trello_reports.analytics.period import resolve_date_range
from trello_reports.reports.base import ReportData

BOARD_ID = "board1"


def make_action(
    action_id: str,
    action_type: str,
    member_id: str,
    card: tuple[str, str] | None = None,
    date: str = "2024-02-01T10:00:00.000Z",
    **payload: Any,
) -> dict[str, Any]:
    """Build a raw Trello action payload."""
    data = dict(payload)
    if card:
        data["card"] = {"id": card[0], "name": card[1]}
    return {
        "id": action_id,
        "idMemberCreator": member_id,
        "type": action_type,
        "date": date,
        "data": data,
    }


def list_ref(list_id: str, name: str) -> dict[str, str]:
    return {"id": list_id, "name": name}


TODO = list_ref("l-todo", "To Do")
DOING = list_ref("l-doing", "Doing")
REVIEW = list_ref("l-review", "Review")
DONE = list_ref("l-done", "Done")


@pytest.fixture
def raw_board():
    return {
        "id": BOARD_ID,
        "name": "Project Alpha",
        "desc": "Alpha team board",
        "url": "https://trello.com/b/abc/project-alpha",
        "shortUrl": "https://trello.com/b/abc",
        "closed": False,
        "dateLastActivity": "2024-03-28T09:15:00.000Z",
        "idOrganization": "org1",
    }


@pytest.fixture
def raw_lists():
    return [
        {"id": ref["id"], "name": ref["name"], "idBoard": BOARD_ID, "pos": pos, "closed": False}
        for pos, ref in enumerate([TODO, DOING, REVIEW, DONE], start=1)
    ]


@pytest.fixture
def raw_labels():
    return [
        {"id": "lb-feature", "idBoard": BOARD_ID, "name": "Feature", "color": "green"},
        {"id": "lb-bug", "idBoard": BOARD_ID, "name": "Bug", "color": "red"},
        {"id": "lb-blue", "idBoard": BOARD_ID, "name": "", "color": "blue"},
    ]


@pytest.fixture
def raw_members():
    return [
        {"id": "m1", "fullName": "Alice Smith", "username": "alice"},
        {"id": "m2", "fullName": "Bob Jones", "username": "bob"},
    ]


@pytest.fixture
def raw_cards():
    def card(card_id, name, list_id, labels=(), members=(), desc="", due=None, due_complete=False):
        return {
            "id": card_id,
            "name": name,
            "desc": desc,
            "idBoard": BOARD_ID,
            "idList": list_id,
            "pos": 1,
            "closed": False,
            "dateLastActivity": "2024-03-01T12:00:00.000Z",
            "due": due,
            "dueComplete": due_complete,
            "idMembers": list(members),
            "idLabels": list(labels),
            "url": f"https://trello.com/c/{card_id}",
            "shortUrl": f"https://trello.com/c/{card_id}",
        }

    return [
        card("c1", "Login page", "l-done", labels=["lb-feature"], members=["m1"],
             desc="x" * 150),
        card("c2", "Fix crash", "l-done", labels=["lb-bug"], members=["m2"],
             desc="Crash on startup"),
        card("c3", "Search", "l-doing", labels=["lb-feature", "lb-blue"], members=["m1", "m2"],
             due="2024-04-15T12:00:00.000Z", due_complete=True),
        card("c4", "Docs", "l-todo"),
        card("c5", "Untouched", "l-review", labels=["lb-bug"]),
    ]


@pytest.fixture
def raw_actions():
    return [
        make_action("a1", "createCard", "m1", ("c1", "Login page"), list=TODO),
        make_action("a2", "updateCard", "m1", ("c1", "Login page"), listBefore=TODO, listAfter=DOING),
        make_action("a3", "updateCard", "m2", ("c1", "Login page"), listBefore=DOING, listAfter=DONE),
        make_action("a4", "commentCard", "m2", ("c1", "Login page"), text="Looks good"),
        make_action("a5", "createCard", "m1", ("c3", "Search"), list=TODO),
        make_action("a6", "updateCard", "m1", ("c3", "Search"), listBefore=TODO, listAfter=DOING),
        make_action("a7", "updateCard", "m2", ("c2", "Fix crash"), listBefore=REVIEW, listAfter=DONE),
        make_action("a8", "commentCard", "m1", ("c3", "Search"), text="On it"),
        make_action("a9", "updateCard", "m1", ("c4", "Docs"), old={"desc": ""}),
    ]


@pytest.fixture
def board(raw_board):
    return TrelloBoard.from_api(raw_board)


@pytest.fixture
def lists(raw_lists):
    return [TrelloList.from_api(item) for item in raw_lists]


@pytest.fixture
def labels(raw_labels):
    return [TrelloLabel.from_api(item) for item in raw_labels]


@pytest.fixture
def members(raw_members):
    return [TrelloMember.from_api(item) for item in raw_members]


@pytest.fixture
def cards(raw_cards):
    return [TrelloCard.from_api(item) for item in raw_cards]


@pytest.fixture
def actions(raw_actions):
    return [parse_action(item) for item in raw_actions]


@pytest.fixture
def period():
    return ReportPeriod(type="Q1", year=2024)


@pytest.fixture
def date_range(period) -> DateRange:
    return resolve_date_range(period)


@pytest.fixture
def activity(lists, cards, labels, actions):
    return BoardActivityCalculator.calculate(lists, cards, labels, actions)


@pytest.fixture
def report_data(board, period, date_range, lists, cards, members, labels, actions, activity):
    return ReportData(
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


@pytest.fixture
def action_factory():
    """The make_action builder, for tests that need their own action streams."""
    return make_action
