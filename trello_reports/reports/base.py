"""
Report inputs shared by the full and summary renderers.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, Optional, Sequence, Tuple

from ..analytics.calculators.cards import find_active_card_ids, find_most_active_list
from ..analytics.models import BoardActivity
from ..analytics.period import describe_period, format_range
from ..providers.models import (
    DateRange,
    ReportPeriod,
    TrelloAction,
    TrelloBoard,
    TrelloCard,
    TrelloLabel,
    TrelloList,
    TrelloMember,
)


@dataclass(frozen=True)
class ReportData:
    """Everything a renderer needs; renderers never fetch anything."""
    board: TrelloBoard
    period: ReportPeriod
    date_range: DateRange
    lists: Sequence[TrelloList]
    cards: Sequence[TrelloCard]
    members: Sequence[TrelloMember]
    labels: Sequence[TrelloLabel]
    actions: Sequence[TrelloAction]
    activity: BoardActivity

    @cached_property
    def period_description(self) -> str:
        return describe_period(self.period)

    @cached_property
    def date_range_text(self) -> str:
        return format_range(self.date_range)

    @cached_property
    def active_cards(self) -> List[TrelloCard]:
        """Cards referenced by at least one action, in fetch order."""
        active_ids = find_active_card_ids(self.actions)
        return [card for card in self.cards if card.id in active_ids]

    @cached_property
    def most_active_list(self) -> Optional[TrelloList]:
        return find_most_active_list(self.activity.list_activity, self.lists)

    @cached_property
    def _lists_by_id(self) -> Dict[str, TrelloList]:
        return {lst.id: lst for lst in self.lists}

    @cached_property
    def _members_by_id(self) -> Dict[str, TrelloMember]:
        return {member.id: member for member in self.members}

    def list_by_id(self, list_id: str) -> Optional[TrelloList]:
        return self._lists_by_id.get(list_id)

    def member_by_id(self, member_id: str) -> Optional[TrelloMember]:
        return self._members_by_id.get(member_id)

    def card_members(self, card: TrelloCard) -> List[TrelloMember]:
        return [member for member in self.members if member.id in card.id_members]

    def card_labels(self, card: TrelloCard) -> List[TrelloLabel]:
        return [label for label in self.labels if label.id in card.id_labels]

    def cards_by_list(
        self, cards: Sequence[TrelloCard]
    ) -> List[Tuple[TrelloList, List[TrelloCard]]]:
        """(list, cards) pairs in list order, skipping lists without cards."""
        grouped = []
        for lst in self.lists:
            list_cards = [card for card in cards if card.id_list == lst.id]
            if list_cards:
                grouped.append((lst, list_cards))
        return grouped


def label_names(labels: Sequence[TrelloLabel]) -> str:
    return ", ".join(label.display_name for label in labels)
