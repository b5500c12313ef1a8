"""
Card selectors.

Groups and ranks cards for the report: by label, by event activity, by
completion during the period and by current in-progress membership.
"""

from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from ...providers.models import (
    CardMovedAction,
    TrelloAction,
    TrelloCard,
    TrelloLabel,
    TrelloList,
)

TOP_CARDS_LIMIT = 15
COMPLETION_LIST_NAMES = ("Done", "Completed", "Finished")
IN_PROGRESS_LIST_NAMES = ("In Progress", "Doing", "Working", "Current Sprint")


def _name_matches(name: str, synonyms: Iterable[str]) -> bool:
    lowered = name.lower()
    return any(synonym.lower() in lowered for synonym in synonyms)


def count_card_references(actions: Iterable[TrelloAction]) -> Counter:
    """Number of actions referencing each card id."""
    return Counter(action.card.id for action in actions if action.card)


def find_active_card_ids(actions: Iterable[TrelloAction]) -> Set[str]:
    """Ids of cards referenced by at least one action."""
    return {action.card.id for action in actions if action.card}


def group_cards_by_label(
    cards: Sequence[TrelloCard],
    labels: Sequence[TrelloLabel],
) -> Dict[str, List[TrelloCard]]:
    """
    Group cards by label id.

    Every label gets a group, even when no card carries it. A card appears
    once per label it carries; label ids missing from `labels` are ignored.
    """
    cards_by_label: Dict[str, List[TrelloCard]] = {label.id: [] for label in labels}
    for card in cards:
        for label_id in card.id_labels:
            if label_id in cards_by_label:
                cards_by_label[label_id].append(card)
    return cards_by_label


def find_top_cards(
    cards: Sequence[TrelloCard],
    actions: Sequence[TrelloAction],
    limit: int = TOP_CARDS_LIMIT,
) -> List[TrelloCard]:
    """
    Cards with the most actions in the period, most active first.

    Cards without any action are excluded; ties keep card fetch order.
    """
    counts = count_card_references(actions)
    referenced = [card for card in cards if counts[card.id] > 0]
    return sorted(referenced, key=lambda card: -counts[card.id])[:limit]


def find_completion_list_ids(
    lists: Sequence[TrelloList],
    actions: Sequence[TrelloAction],
    completion_list_names: Sequence[str] = COMPLETION_LIST_NAMES,
) -> Set[str]:
    """
    Ids of lists whose name marks completion.

    A list qualifies by its current name or by the name it had when a card
    was moved into it.
    """
    list_ids = {lst.id for lst in lists if _name_matches(lst.name, completion_list_names)}
    for action in actions:
        if isinstance(action, CardMovedAction) and _name_matches(
            action.list_after.name, completion_list_names
        ):
            list_ids.add(action.list_after.id)
    return list_ids


def find_completed_cards(
    cards: Sequence[TrelloCard],
    lists: Sequence[TrelloList],
    actions: Sequence[TrelloAction],
    completion_list_names: Sequence[str] = COMPLETION_LIST_NAMES,
) -> List[TrelloCard]:
    """Cards moved into a completion list during the period."""
    completion_ids = find_completion_list_ids(lists, actions, completion_list_names)
    completed_ids = {
        action.card.id
        for action in actions
        if isinstance(action, CardMovedAction)
        and action.card
        and action.list_after.id in completion_ids
    }
    return [card for card in cards if card.id in completed_ids]


def find_in_progress_cards(
    cards: Sequence[TrelloCard],
    lists: Sequence[TrelloList],
    in_progress_list_names: Sequence[str] = IN_PROGRESS_LIST_NAMES,
) -> List[TrelloCard]:
    """
    Cards currently sitting in an in-progress list.

    Uses current list membership, not the period's actions, so a card can be
    in progress without any activity in the period.
    """
    in_progress_ids = {
        lst.id for lst in lists if _name_matches(lst.name, in_progress_list_names)
    }
    return [card for card in cards if card.id_list in in_progress_ids]


def find_most_active_list(
    list_activity: Mapping[str, int],
    lists: Sequence[TrelloList],
) -> Optional[TrelloList]:
    """List with the highest activity counter; None when nothing happened."""
    ranked = rank_lists_by_activity(list_activity, lists)
    if not ranked or ranked[0][1] == 0:
        return None
    return ranked[0][0]


def rank_lists_by_activity(
    list_activity: Mapping[str, int],
    lists: Sequence[TrelloList],
) -> List[Tuple[TrelloList, int]]:
    """Lists paired with their activity, busiest first (ties keep list order)."""
    by_id = {lst.id: lst for lst in lists}
    pairs = [(by_id[list_id], count) for list_id, count in list_activity.items() if list_id in by_id]
    return sorted(pairs, key=lambda pair: -pair[1])


def find_most_active_members(
    members_active: Mapping[str, int],
    limit: int = 5,
) -> List[Tuple[str, int]]:
    """(member id, action count) pairs, most active first."""
    ranked = sorted(members_active.items(), key=lambda item: -item[1])
    return ranked[:limit]
