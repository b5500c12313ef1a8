"""Calculators for board report analytics."""

from .activity import BoardActivityCalculator, calculate_board_activity
from .cards import (
    COMPLETION_LIST_NAMES,
    IN_PROGRESS_LIST_NAMES,
    TOP_CARDS_LIMIT,
    count_card_references,
    find_active_card_ids,
    find_completed_cards,
    find_completion_list_ids,
    find_in_progress_cards,
    find_most_active_list,
    find_most_active_members,
    find_top_cards,
    group_cards_by_label,
    rank_lists_by_activity,
)

__all__ = [
    "BoardActivityCalculator",
    "calculate_board_activity",
    "COMPLETION_LIST_NAMES",
    "IN_PROGRESS_LIST_NAMES",
    "TOP_CARDS_LIMIT",
    "count_card_references",
    "find_active_card_ids",
    "find_completed_cards",
    "find_completion_list_ids",
    "find_in_progress_cards",
    "find_most_active_list",
    "find_most_active_members",
    "find_top_cards",
    "group_cards_by_label",
    "rank_lists_by_activity",
]
