"""
Data models for Trello API objects

Snapshots of boards, lists, cards, members, labels, checklists and board
actions, parsed from the JSON returned by the Trello REST API.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse a Trello ISO-8601 timestamp ("2024-01-15T10:30:00.000Z")"""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return None


@dataclass
class TrelloBoard:
    """A named workspace containing lists and cards"""
    id: str
    name: str = ""
    desc: str = ""
    url: str = ""
    short_url: str = ""
    closed: bool = False
    date_last_activity: Optional[datetime] = None
    id_organization: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TrelloBoard":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            desc=data.get("desc") or "",
            url=data.get("url") or "",
            short_url=data.get("shortUrl") or "",
            closed=bool(data.get("closed", False)),
            date_last_activity=parse_datetime(data.get("dateLastActivity")),
            id_organization=data.get("idOrganization"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "desc": self.desc,
            "url": self.url,
            "shortUrl": self.short_url,
            "closed": self.closed,
            "dateLastActivity": (
                self.date_last_activity.isoformat() if self.date_last_activity else None
            ),
            "idOrganization": self.id_organization,
        }


@dataclass
class TrelloList:
    """A column / workflow stage within a board"""
    id: str
    name: str = ""
    id_board: str = ""
    pos: float = 0
    closed: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TrelloList":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            id_board=data.get("idBoard") or "",
            pos=data.get("pos") or 0,
            closed=bool(data.get("closed", False)),
        )


@dataclass
class TrelloCard:
    """A unit of work belonging to exactly one list"""
    id: str
    name: str = ""
    desc: str = ""
    id_board: str = ""
    id_list: str = ""
    pos: float = 0
    closed: bool = False
    date_last_activity: Optional[datetime] = None
    due: Optional[datetime] = None
    due_complete: bool = False
    id_members: List[str] = field(default_factory=list)
    id_labels: List[str] = field(default_factory=list)
    url: str = ""
    short_url: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TrelloCard":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            desc=data.get("desc") or "",
            id_board=data.get("idBoard") or "",
            id_list=data.get("idList") or "",
            pos=data.get("pos") or 0,
            closed=bool(data.get("closed", False)),
            date_last_activity=parse_datetime(data.get("dateLastActivity")),
            due=parse_datetime(data.get("due")),
            due_complete=bool(data.get("dueComplete", False)),
            id_members=list(data.get("idMembers") or []),
            id_labels=list(data.get("idLabels") or []),
            url=data.get("url") or "",
            short_url=data.get("shortUrl") or "",
        )


@dataclass
class TrelloMember:
    """Board member"""
    id: str
    full_name: str = ""
    username: str = ""
    avatar_url: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TrelloMember":
        return cls(
            id=data["id"],
            full_name=data.get("fullName") or "",
            username=data.get("username") or "",
            avatar_url=data.get("avatarUrl"),
        )


@dataclass
class TrelloLabel:
    """Board label; name may be empty, in which case the color identifies it"""
    id: str
    id_board: str = ""
    name: str = ""
    color: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TrelloLabel":
        return cls(
            id=data["id"],
            id_board=data.get("idBoard") or "",
            name=data.get("name") or "",
            color=data.get("color") or "",
        )

    @property
    def display_name(self) -> str:
        return self.name or self.color


@dataclass
class CheckItem:
    id: str
    name: str = ""
    state: str = "incomplete"

    @property
    def complete(self) -> bool:
        return self.state == "complete"


@dataclass
class TrelloChecklist:
    """Checklist attached to a card"""
    id: str
    name: str = ""
    id_card: str = ""
    check_items: List[CheckItem] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TrelloChecklist":
        items = sorted(data.get("checkItems") or [], key=lambda item: item.get("pos") or 0)
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            id_card=data.get("idCard") or "",
            check_items=[
                CheckItem(
                    id=item["id"],
                    name=item.get("name") or "",
                    state=item.get("state") or "incomplete",
                )
                for item in items
            ],
        )

    @property
    def completed_count(self) -> int:
        return sum(1 for item in self.check_items if item.complete)


# ==================== Board Actions ====================

ACTION_CREATE_CARD = "createCard"
ACTION_UPDATE_CARD = "updateCard"
ACTION_COMMENT_CARD = "commentCard"


@dataclass(frozen=True)
class EntityRef:
    """Reference to a list or card embedded in an action payload"""
    id: str
    name: str = ""

    @classmethod
    def from_payload(cls, data: Optional[Dict[str, Any]]) -> Optional["EntityRef"]:
        if not data or not data.get("id"):
            return None
        return cls(id=data["id"], name=data.get("name") or "")


@dataclass
class BaseAction:
    """Fields shared by every board action"""
    id: str
    id_member_creator: str
    type: str
    date: Optional[datetime]
    card: Optional[EntityRef] = None


@dataclass
class CardCreatedAction(BaseAction):
    list_ref: Optional[EntityRef] = None


@dataclass
class CardMovedAction(BaseAction):
    """An updateCard action carrying a list transition"""
    list_before: Optional[EntityRef] = None
    list_after: Optional[EntityRef] = None


@dataclass
class CardUpdatedAction(BaseAction):
    """An updateCard action without a list transition"""


@dataclass
class CommentAction(BaseAction):
    text: str = ""


@dataclass
class GenericAction(BaseAction):
    """Any action type not tracked by the report"""
    list_ref: Optional[EntityRef] = None


TrelloAction = Union[
    CardCreatedAction, CardMovedAction, CardUpdatedAction, CommentAction, GenericAction
]


def parse_action(data: Dict[str, Any]) -> TrelloAction:
    """Select the action variant matching the raw payload"""
    payload = data.get("data") or {}
    common = dict(
        id=data["id"],
        id_member_creator=data.get("idMemberCreator") or "",
        type=data.get("type") or "",
        date=parse_datetime(data.get("date")),
    )
    card = EntityRef.from_payload(payload.get("card"))
    action_type = common["type"]

    if action_type == ACTION_CREATE_CARD:
        return CardCreatedAction(
            **common, list_ref=EntityRef.from_payload(payload.get("list")), card=card
        )

    if action_type == ACTION_UPDATE_CARD:
        list_before = EntityRef.from_payload(payload.get("listBefore"))
        list_after = EntityRef.from_payload(payload.get("listAfter"))
        if list_before and list_after:
            return CardMovedAction(
                **common, list_before=list_before, list_after=list_after, card=card
            )
        return CardUpdatedAction(**common, card=card)

    if action_type == ACTION_COMMENT_CARD:
        return CommentAction(**common, text=payload.get("text") or "", card=card)

    return GenericAction(
        **common, list_ref=EntityRef.from_payload(payload.get("list")), card=card
    )


# ==================== Report Inputs ====================

PERIOD_TYPES = ("Q1", "Q2", "Q3", "Q4", "year")


@dataclass(frozen=True)
class ReportPeriod:
    """A calendar quarter or full year"""
    type: Optional[str]
    year: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "year": self.year}


@dataclass(frozen=True)
class DateRange:
    start: datetime
    end: datetime

    def to_dict(self) -> Dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}
