"""Analytics data models."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Sequence, Tuple

from ..providers.models import TrelloCard, TrelloChecklist


def freeze_mapping(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


_EMPTY: Mapping = MappingProxyType({})


@dataclass(frozen=True)
class BoardActivity:
    """
    Derived activity metrics for one board over one report period.

    Built once per report by BoardActivityCalculator; never mutated afterwards.
    Mapping fields preserve the insertion order used to build them (list and
    label fetch order, first-seen order for members), which keeps rendered
    output deterministic.
    """
    cards_created: int = 0
    cards_moved: int = 0
    comments_added: int = 0
    members_active: Mapping[str, int] = field(default_factory=lambda: _EMPTY)
    list_activity: Mapping[str, int] = field(default_factory=lambda: _EMPTY)
    card_flow: Mapping[str, Mapping[str, int]] = field(default_factory=lambda: _EMPTY)
    cards_by_label: Mapping[str, Tuple[TrelloCard, ...]] = field(default_factory=lambda: _EMPTY)
    top_cards: Tuple[TrelloCard, ...] = ()
    completed_cards: Tuple[TrelloCard, ...] = ()
    in_progress_cards: Tuple[TrelloCard, ...] = ()
    card_checklists: Mapping[str, Tuple[TrelloChecklist, ...]] = field(default_factory=lambda: _EMPTY)

    def with_checklists(
        self, checklists: Mapping[str, Sequence[TrelloChecklist]]
    ) -> "BoardActivity":
        """Return a copy carrying the fetched checklists of the top cards."""
        return replace(
            self,
            card_checklists=freeze_mapping(
                {card_id: tuple(items) for card_id, items in checklists.items()}
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain-JSON view (card collections reduced to card ids)."""
        return {
            "cardsCreated": self.cards_created,
            "cardsMoved": self.cards_moved,
            "commentsAdded": self.comments_added,
            "membersActive": dict(self.members_active),
            "listActivity": dict(self.list_activity),
            "cardFlow": {source: dict(targets) for source, targets in self.card_flow.items()},
            "cardsByLabel": {
                label_id: [card.id for card in cards]
                for label_id, cards in self.cards_by_label.items()
            },
            "topCards": [card.id for card in self.top_cards],
            "completedCards": [card.id for card in self.completed_cards],
            "inProgressCards": [card.id for card in self.in_progress_cards],
            "cardChecklists": {
                card_id: [checklist.id for checklist in checklists]
                for card_id, checklists in self.card_checklists.items()
            },
        }
