"""
Unit tests for the board activity calculator and card selectors
"""

import pytest

from trello_reports.analytics.calculators.activity import (
    BoardActivityCalculator,
    calculate_board_activity,
)
from trello_reports.analytics.calculators.cards import (
    find_completed_cards,
    find_in_progress_cards,
    find_most_active_list,
    find_most_active_members,
    find_top_cards,
    group_cards_by_label,
    rank_lists_by_activity,
)
from trello_reports.providers.models import TrelloCard, TrelloList, parse_action


def ids(items):
    return [item.id for item in items]


class TestBoardActivityCalculator:
    """Tests for the single-pass activity aggregate."""

    def test_counters(self, activity):
        assert activity.cards_created == 2
        assert activity.cards_moved == 4
        assert activity.comments_added == 2

    def test_member_activity_counts_every_action(self, activity):
        assert dict(activity.members_active) == {"m1": 6, "m2": 3}
        assert list(activity.members_active) == ["m1", "m2"]

    def test_list_activity(self, activity):
        assert dict(activity.list_activity) == {
            "l-todo": 4,
            "l-doing": 3,
            "l-review": 1,
            "l-done": 2,
        }

    def test_card_flow(self, activity):
        assert activity.card_flow["l-todo"]["l-doing"] == 2
        assert activity.card_flow["l-doing"]["l-done"] == 1
        assert activity.card_flow["l-review"]["l-done"] == 1
        assert activity.card_flow["l-done"]["l-todo"] == 0

    def test_flow_has_no_self_edges(self, activity):
        for source, targets in activity.card_flow.items():
            assert source not in targets

    def test_flow_sum_equals_moved_count(self, activity):
        total = sum(sum(targets.values()) for targets in activity.card_flow.values())

        assert total == activity.cards_moved

    def test_idempotent(self, lists, cards, labels, actions):
        first = BoardActivityCalculator.calculate(lists, cards, labels, actions)
        second = calculate_board_activity(lists, cards, labels, actions)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_self_edge_and_unknown_list_moves_are_ignored(self, lists, cards, labels, action_factory):
        todo = {"id": "l-todo", "name": "To Do"}
        actions = [
            parse_action(action_factory("x1", "updateCard", "m1", ("c1", "Login page"),
                                        listBefore=todo, listAfter=todo)),
            parse_action(action_factory("x2", "updateCard", "m1", ("c1", "Login page"),
                                        listBefore=todo,
                                        listAfter={"id": "l-archived", "name": "Archive"})),
        ]

        activity = BoardActivityCalculator.calculate(lists, cards, labels, actions)

        assert activity.cards_moved == 0
        assert activity.list_activity["l-todo"] == 0
        assert all(count == 0 for targets in activity.card_flow.values() for count in targets.values())
        assert dict(activity.members_active) == {"m1": 2}

    def test_empty_action_stream(self, lists, cards, labels):
        activity = BoardActivityCalculator.calculate(lists, cards, labels, [])

        assert activity.cards_created == 0
        assert activity.top_cards == ()
        assert activity.completed_cards == ()
        assert ids(activity.in_progress_cards) == ["c3"]

    def test_aggregate_is_read_only(self, activity):
        with pytest.raises(TypeError):
            activity.list_activity["l-todo"] = 99
        with pytest.raises(TypeError):
            activity.card_flow["l-todo"]["l-doing"] = 99

    def test_with_checklists_returns_copy(self, activity):
        updated = activity.with_checklists({"c1": []})

        assert dict(updated.card_checklists) == {"c1": ()}
        assert dict(activity.card_checklists) == {}

    def test_to_dict_uses_card_ids(self, activity):
        data = activity.to_dict()

        assert data["cardsMoved"] == 4
        assert data["topCards"] == ["c1", "c3", "c2", "c4"]
        assert data["cardFlow"]["l-todo"]["l-doing"] == 2
        assert data["cardsByLabel"]["lb-blue"] == ["c3"]


class TestGroupCardsByLabel:
    """Tests for group_cards_by_label."""

    def test_every_card_in_one_group_per_label(self, cards, labels):
        groups = group_cards_by_label(cards, labels)

        for card in cards:
            memberships = sum(1 for group in groups.values() if card in group)
            assert memberships == len(card.id_labels)

    def test_empty_groups_are_kept(self, cards, labels):
        cards_without_search = [card for card in cards if card.id != "c3"]

        groups = group_cards_by_label(cards_without_search, labels)

        assert groups["lb-blue"] == []
        assert list(groups) == ["lb-feature", "lb-bug", "lb-blue"]

    def test_unknown_label_ids_are_ignored(self, labels):
        card = TrelloCard(id="z1", id_labels=["lb-bug", "lb-deleted"])

        groups = group_cards_by_label([card], labels)

        assert "lb-deleted" not in groups
        assert ids(groups["lb-bug"]) == ["z1"]


class TestCardSelectors:
    """Tests for top, completed and in-progress card selection."""

    def test_top_cards_order(self, cards, actions):
        assert ids(find_top_cards(cards, actions)) == ["c1", "c3", "c2", "c4"]

    def test_top_cards_limit(self, cards, actions):
        assert ids(find_top_cards(cards, actions, limit=2)) == ["c1", "c3"]

    def test_top_cards_bounded_by_referenced_cards(self, action_factory):
        cards = [TrelloCard(id=f"c{i}") for i in range(30)]
        actions = [
            parse_action(action_factory(f"a{i}", "commentCard", "m1", (f"c{i}", "")))
            for i in range(20)
            for _ in range(i % 3 + 1)
        ]

        top = find_top_cards(cards, actions)

        assert len(top) == 15
        counts = [sum(1 for a in actions if a.card.id == card.id) for card in top]
        assert counts == sorted(counts, reverse=True)

    def test_completed_cards(self, cards, lists, actions):
        assert ids(find_completed_cards(cards, lists, actions)) == ["c1", "c2"]

    def test_completed_uses_list_name_at_move_time(self, action_factory):
        cards = [TrelloCard(id="c1", id_list="l-shipped")]
        lists = [TrelloList(id="l-shipped", name="Shipped")]
        actions = [parse_action(action_factory(
            "a1", "updateCard", "m1", ("c1", ""),
            listBefore={"id": "l-wip", "name": "WIP"},
            listAfter={"id": "l-shipped", "name": "Finished work"},
        ))]

        assert ids(find_completed_cards(cards, lists, actions)) == ["c1"]

    def test_in_progress_uses_current_membership(self, cards, lists):
        assert ids(find_in_progress_cards(cards, lists)) == ["c3"]

    def test_in_progress_name_match_is_case_insensitive(self):
        lists = [TrelloList(id="l1", name="CURRENT SPRINT"), TrelloList(id="l2", name="Ideas")]
        cards = [TrelloCard(id="c1", id_list="l1"), TrelloCard(id="c2", id_list="l2")]

        assert ids(find_in_progress_cards(cards, lists)) == ["c1"]


class TestRankings:
    """Tests for list and member rankings."""

    def test_most_active_list(self, activity, lists):
        assert find_most_active_list(activity.list_activity, lists).name == "To Do"

    def test_no_most_active_list_without_activity(self, lists):
        assert find_most_active_list({lst.id: 0 for lst in lists}, lists) is None

    def test_rank_lists_ties_keep_list_order(self, lists):
        ranked = rank_lists_by_activity(
            {"l-todo": 1, "l-doing": 3, "l-review": 1, "l-done": 0}, lists
        )

        assert [(lst.id, count) for lst, count in ranked] == [
            ("l-doing", 3),
            ("l-todo", 1),
            ("l-review", 1),
            ("l-done", 0),
        ]

    def test_most_active_members(self, activity):
        assert find_most_active_members(activity.members_active) == [("m1", 6), ("m2", 3)]
        assert find_most_active_members(activity.members_active, limit=1) == [("m1", 6)]
