"""
Board activity calculator.

Reduces a board's actions for one report period to the BoardActivity
aggregate in a single pass over the action sequence.
"""

import logging
from typing import Dict, Sequence

from ...providers.models import (
    CardCreatedAction,
    CardMovedAction,
    CommentAction,
    TrelloAction,
    TrelloCard,
    TrelloLabel,
    TrelloList,
)
from ..models import BoardActivity, freeze_mapping
from .cards import (
    TOP_CARDS_LIMIT,
    find_completed_cards,
    find_in_progress_cards,
    find_top_cards,
    group_cards_by_label,
)

logger = logging.getLogger(__name__)


class BoardActivityCalculator:
    """Calculates the activity aggregate of a board"""

    @staticmethod
    def calculate(
        lists: Sequence[TrelloList],
        cards: Sequence[TrelloCard],
        labels: Sequence[TrelloLabel],
        actions: Sequence[TrelloAction],
        top_cards_limit: int = TOP_CARDS_LIMIT,
    ) -> BoardActivity:
        """
        Calculate board activity from the period's actions.

        Args:
            lists: Lists of the board (fetch order)
            cards: Cards of the board (fetch order)
            labels: Labels of the board (fetch order)
            actions: Actions of the board within the report period

        Returns:
            BoardActivity with counters, list flow and card selections.
            Checklists are not included; see BoardActivity.with_checklists.
        """
        list_ids = [lst.id for lst in lists]
        known_lists = set(list_ids)

        cards_created = 0
        cards_moved = 0
        comments_added = 0
        members_active: Dict[str, int] = {}
        list_activity: Dict[str, int] = {list_id: 0 for list_id in list_ids}
        # Every ordered pair of distinct lists starts at zero.
        card_flow: Dict[str, Dict[str, int]] = {
            source: {target: 0 for target in list_ids if target != source}
            for source in list_ids
        }

        for action in actions:
            member_id = action.id_member_creator
            members_active[member_id] = members_active.get(member_id, 0) + 1

            if isinstance(action, CardCreatedAction):
                cards_created += 1
                if action.list_ref and action.list_ref.id in known_lists:
                    list_activity[action.list_ref.id] += 1

            elif isinstance(action, CardMovedAction):
                source = action.list_before.id
                target = action.list_after.id
                if source == target or source not in known_lists or target not in known_lists:
                    logger.debug(
                        "Ignoring list transition %s -> %s in action %s",
                        source, target, action.id,
                    )
                    continue
                cards_moved += 1
                list_activity[source] += 1
                list_activity[target] += 1
                card_flow[source][target] += 1

            elif isinstance(action, CommentAction):
                comments_added += 1

        cards_by_label = group_cards_by_label(cards, labels)
        top_cards = find_top_cards(cards, actions, top_cards_limit)
        completed_cards = find_completed_cards(cards, lists, actions)
        in_progress_cards = find_in_progress_cards(cards, lists)

        logger.debug(
            "Board activity: %d created, %d moved, %d comments, %d members, "
            "%d top / %d completed / %d in progress cards",
            cards_created, cards_moved, comments_added, len(members_active),
            len(top_cards), len(completed_cards), len(in_progress_cards),
        )

        return BoardActivity(
            cards_created=cards_created,
            cards_moved=cards_moved,
            comments_added=comments_added,
            members_active=freeze_mapping(members_active),
            list_activity=freeze_mapping(list_activity),
            card_flow=freeze_mapping(
                {source: freeze_mapping(targets) for source, targets in card_flow.items()}
            ),
            cards_by_label=freeze_mapping(
                {label_id: tuple(group) for label_id, group in cards_by_label.items()}
            ),
            top_cards=tuple(top_cards),
            completed_cards=tuple(completed_cards),
            in_progress_cards=tuple(in_progress_cards),
        )


def calculate_board_activity(
    lists: Sequence[TrelloList],
    cards: Sequence[TrelloCard],
    labels: Sequence[TrelloLabel],
    actions: Sequence[TrelloAction],
) -> BoardActivity:
    """Functional entry point, see BoardActivityCalculator.calculate."""
    return BoardActivityCalculator.calculate(lists, cards, labels, actions)
