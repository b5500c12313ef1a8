"""
Full board report.

Renders every section of the detailed markdown report: overview, activity
counters, list/member/label tables, card flow, completed work, key cards,
work in progress and the closing summary.
"""

from collections import Counter
from datetime import datetime
from typing import List, Optional

from ..analytics.calculators.cards import find_most_active_members
from ..analytics.period import format_date
from .base import ReportData, label_names
from .work_summary import completed_cards_by_label, generate_work_summary

KEY_CARDS_LIMIT = 10
MEMBER_ACTIVITY_LIMIT = 5
DESCRIPTION_PREVIEW_LENGTH = 100


def _overview(data: ReportData) -> List[str]:
    board = data.board
    last_activity = (
        format_date(board.date_last_activity) if board.date_last_activity else "Unknown"
    )
    lines = [
        "## Board Overview",
        "",
        f"- **Board Name**: {board.name}",
    ]
    if board.desc:
        lines.append(f"- **Description**: {board.desc}")
    lines.extend([
        f"- **URL**: {board.url}",
        f"- **Last Activity**: {last_activity}",
        f"- **Lists**: {len(data.lists)}",
        f"- **Cards**: {len(data.cards)} total, {len(data.active_cards)} active in this period",
        f"- **Members**: {len(data.members)}",
        "",
    ])
    return lines


def _activity_summary(data: ReportData) -> List[str]:
    activity = data.activity
    lines = [
        "## Activity Summary",
        "",
        f"- **Cards Created**: {activity.cards_created}",
        f"- **Cards Moved**: {activity.cards_moved}",
        f"- **Comments Added**: {activity.comments_added}",
    ]
    if data.most_active_list:
        lines.append(f"- **Most Active List**: {data.most_active_list.name}")
    lines.append("")
    return lines


def _list_breakdown(data: ReportData) -> List[str]:
    lines = [
        "## List Breakdown",
        "",
        "| List Name | Cards | Activity |",
        "|-----------|-------|----------|",
    ]
    for lst in data.lists:
        card_count = sum(1 for card in data.active_cards if card.id_list == lst.id)
        activity_count = data.activity.list_activity.get(lst.id, 0)
        lines.append(f"| {lst.name} | {card_count} | {activity_count} |")
    lines.append("")
    return lines


def _member_activity(data: ReportData) -> List[str]:
    if not data.members:
        return []

    lines = [
        "## Member Activity",
        "",
        "| Member | Activity |",
        "|--------|----------|",
    ]
    for member_id, count in find_most_active_members(
        data.activity.members_active, MEMBER_ACTIVITY_LIMIT
    ):
        member = data.member_by_id(member_id)
        if member:
            lines.append(f"| {member.full_name} | {count} |")
    lines.append("")
    return lines


def _label_usage(data: ReportData) -> List[str]:
    if not data.labels or not data.active_cards:
        return []

    usage = Counter(
        label_id for card in data.active_cards for label_id in card.id_labels
    )
    ranked = sorted(data.labels, key=lambda label: -usage[label.id])

    lines = [
        "## Label Usage",
        "",
        "| Label | Color | Usage |",
        "|-------|-------|-------|",
    ]
    for label in ranked:
        if usage[label.id] > 0:
            lines.append(f"| {label.name or '(no name)'} | {label.color} | {usage[label.id]} |")
    lines.append("")
    return lines


def _card_flow(data: ReportData) -> List[str]:
    if data.activity.cards_moved == 0:
        return []

    lines = [
        "## Card Flow",
        "",
        "This section shows how cards moved between lists during the period.",
        "",
    ]
    rendered = False
    for source_id, targets in data.activity.card_flow.items():
        source = data.list_by_id(source_id)
        if source is None or not any(count > 0 for count in targets.values()):
            continue
        rendered = True
        lines.extend([f'### From "{source.name}"', ""])
        for target_id, count in targets.items():
            target = data.list_by_id(target_id)
            if count > 0 and target:
                lines.append(f'- **To "{target.name}"**: {count} cards')
        lines.append("")

    if not rendered:
        lines.extend(["No significant card flow detected in this period.", ""])
    return lines


def _completed_features(data: ReportData) -> List[str]:
    activity = data.activity
    if not activity.completed_cards:
        return []

    lines = ["## Completed Features", ""]
    for label, cards in completed_cards_by_label(
        activity.completed_cards, data.labels, activity.cards_by_label
    ):
        lines.extend([f"### {label.name} ({len(cards)})", ""])
        for card in cards:
            entry = f"- **{card.name}**"
            if card.desc:
                preview = card.desc
                if len(preview) > DESCRIPTION_PREVIEW_LENGTH:
                    preview = preview[:DESCRIPTION_PREVIEW_LENGTH] + "..."
                entry += f": {preview}"
            lines.append(f"{entry} [View Card]({card.url})")
        lines.append("")
    return lines


def _key_cards(data: ReportData) -> List[str]:
    activity = data.activity
    if not activity.top_cards:
        return []

    lines = [
        "## Key Cards",
        "",
        "These cards had the most activity during this period:",
        "",
    ]
    for index, card in enumerate(activity.top_cards[:KEY_CARDS_LIMIT], start=1):
        card_list = data.list_by_id(card.id_list)
        lines.extend([
            f"### {index}. {card.name}",
            "",
            f"- **List**: {card_list.name if card_list else 'Unknown'}",
        ])

        card_members = data.card_members(card)
        if card_members:
            names = ", ".join(member.full_name for member in card_members)
            lines.append(f"- **Assigned to**: {names}")

        card_labels = data.card_labels(card)
        if card_labels:
            lines.append(f"- **Labels**: {label_names(card_labels)}")

        if card.due:
            completed = " (Completed)" if card.due_complete else ""
            lines.append(f"- **Due**: {format_date(card.due)}{completed}")

        checklists = activity.card_checklists.get(card.id, ())
        total_items = sum(len(checklist.check_items) for checklist in checklists)
        if total_items:
            done_items = sum(checklist.completed_count for checklist in checklists)
            lines.append(f"- **Checklists**: {done_items}/{total_items} items complete")

        if card.desc:
            lines.extend(["", "**Description**:", "", card.desc])

        lines.extend(["", f"[View Card on Trello]({card.url})", ""])
    return lines


def _work_in_progress(data: ReportData) -> List[str]:
    if not data.activity.in_progress_cards:
        return []

    lines = ["## Work In Progress", ""]
    for lst, cards in data.cards_by_list(data.activity.in_progress_cards):
        lines.extend([f"### {lst.name} ({len(cards)})", ""])
        for card in cards:
            entry = f"- **{card.name}**"
            card_labels = data.card_labels(card)
            if card_labels:
                entry += f" [{label_names(card_labels)}]"
            if card.due:
                entry += f" (Due: {format_date(card.due)})"
            lines.append(entry)
        lines.append("")
    return lines


def render_full_report(data: ReportData, now: Optional[datetime] = None) -> str:
    """
    Render the detailed markdown report for one board and period.

    Args:
        data: Fetched board collections and their activity aggregate
        now: Timestamp for the "generated on" line (defaults to current time)

    Returns:
        Markdown document
    """
    now = now or datetime.now()
    activity = data.activity

    lines = [
        f"# Trello Board Report: {data.board.name}",
        "",
        f"## Report Period: {data.period_description}",
        "",
        f"Date Range: {data.date_range_text}",
        "",
    ]
    lines += _overview(data)
    lines += _activity_summary(data)
    lines += _list_breakdown(data)
    lines += _member_activity(data)
    lines += _label_usage(data)
    lines += _card_flow(data)
    lines += [
        "## Work Summary",
        "",
        generate_work_summary(
            activity.completed_cards, data.labels, activity.cards_by_label
        ),
        "",
    ]
    lines += _completed_features(data)
    lines += _key_cards(data)
    lines += _work_in_progress(data)
    lines += [
        "## Summary",
        "",
        f"This report covers Trello board activity for {data.board.name} "
        f"during {data.period_description} ({data.date_range_text}).",
        f"Total activity: {len(data.actions)} actions recorded.",
        "",
        f"*Report generated on {format_date(now)}*",
        "",
    ]
    return "\n".join(lines)
