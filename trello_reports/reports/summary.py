"""
Summary board report.

A condensed narrative of the period with recommendations derived from fixed
heuristics on completion counts and the most active list.
"""

from datetime import datetime
from typing import List, Optional

from ..analytics.calculators.cards import find_most_active_members, rank_lists_by_activity
from ..analytics.period import format_date
from .base import ReportData, label_names
from .work_summary import generate_work_summary

TEAM_ACTIVITY_LIMIT = 3
FOCUS_AREAS_LIMIT = 3
LOW_COMPLETION_THRESHOLD = 3

# First match wins.
LIST_RECOMMENDATIONS = (
    (
        ("backlog", "todo"),
        "- There's significant activity in the \"{name}\" list. Consider prioritizing "
        "these items to move them forward in the workflow.",
    ),
    (
        ("progress", "doing"),
        "- Many cards are in \"{name}\". Consider whether the team might be taking on "
        "too much work simultaneously.",
    ),
    (
        ("review", "validation"),
        "- The \"{name}\" list appears to be a potential bottleneck. Consider allocating "
        "more resources to review and validation.",
    ),
)


def _overall_activity(data: ReportData) -> List[str]:
    activity = data.activity
    return [
        "## Overall Activity",
        "",
        f"During {data.period_description} ({data.date_range_text}), the team recorded "
        f"{len(data.actions)} activities across {len(data.active_cards)} cards. "
        f"There were {activity.cards_created} new cards created, {activity.cards_moved} "
        f"card movements, and {activity.comments_added} comments added.",
        "",
    ]


def _team_activity(data: ReportData) -> List[str]:
    most_active = find_most_active_members(data.activity.members_active, TEAM_ACTIVITY_LIMIT)
    if not most_active:
        return []

    names = []
    for member_id, _ in most_active:
        member = data.member_by_id(member_id)
        names.append(member.full_name if member else "Unknown Member")
    return [
        "## Team Activity",
        "",
        f"The most active team members were: {', '.join(names)}.",
        "",
    ]


def _key_focus_areas(data: ReportData) -> List[str]:
    if not data.activity.top_cards:
        return []

    lines = [
        "## Key Focus Areas",
        "",
        "The team focused primarily on these items:",
        "",
    ]
    for index, card in enumerate(data.activity.top_cards[:FOCUS_AREAS_LIMIT], start=1):
        card_labels = data.card_labels(card)
        label_text = f" ({label_names(card_labels)})" if card_labels else ""
        card_list = data.list_by_id(card.id_list)
        list_name = card_list.name if card_list else "Unknown List"
        lines.append(f"{index}. **{card.name}**{label_text} - {list_name}")
    lines.append("")
    return lines


def _workflow_analysis(data: ReportData) -> List[str]:
    most_active_list = data.most_active_list
    if data.activity.cards_moved == 0 or most_active_list is None:
        return []

    text = (
        f'The most active list was "{most_active_list.name}", indicating this was '
        "a key stage in the workflow. "
    )
    ranked = rank_lists_by_activity(data.activity.list_activity, data.lists)
    if len(ranked) >= 2 and ranked[1][1] > 0:
        text += f'"{ranked[1][0].name}" also saw significant activity.'
    return ["## Workflow Analysis", "", text.rstrip(), ""]


def _current_work(data: ReportData) -> List[str]:
    in_progress = data.activity.in_progress_cards
    if not in_progress:
        return []

    count = len(in_progress)
    verb, noun = ("is", "card") if count == 1 else ("are", "cards")
    text = f"There {verb} currently {count} {noun} in progress."

    per_list = [
        f'{len(cards)} in "{lst.name}"' for lst, cards in data.cards_by_list(in_progress)
    ]
    if per_list:
        text += f" This includes {', '.join(per_list)}."
    return ["## Current Work", "", text, ""]


def build_recommendations(data: ReportData) -> List[str]:
    """Recommendation bullet lines for the summary report."""
    recommendations = []

    completed = len(data.activity.completed_cards)
    if completed == 0:
        recommendations.append(
            "- Consider investigating why no cards were completed during this period."
        )
        return recommendations
    if completed < LOW_COMPLETION_THRESHOLD and data.period.type != "year":
        recommendations.append(
            "- The completion rate appears to be lower than optimal. Consider reviewing "
            "the workflow for potential bottlenecks."
        )

    most_active_list = data.most_active_list
    if most_active_list:
        lowered = most_active_list.name.lower()
        for keywords, template in LIST_RECOMMENDATIONS:
            if any(keyword in lowered for keyword in keywords):
                recommendations.append(template.format(name=most_active_list.name))
                break

    return recommendations


def render_summary_report(data: ReportData, now: Optional[datetime] = None) -> str:
    """
    Render the condensed markdown summary for one board and period.

    `now` only stamps the footer; the narrative depends on `data` alone.
    """
    now = now or datetime.now()
    activity = data.activity

    lines = [f"# {data.board.name} - {data.period_description} Summary", ""]
    lines += _overall_activity(data)
    lines += _team_activity(data)
    lines += [
        "## Work Completed",
        "",
        generate_work_summary(
            activity.completed_cards, data.labels, activity.cards_by_label
        ),
        "",
    ]
    lines += _key_focus_areas(data)
    lines += _workflow_analysis(data)
    lines += _current_work(data)
    lines += ["## Recommendations", ""]
    lines += build_recommendations(data)
    lines += ["", f"*Report generated on {format_date(now)}*", ""]
    return "\n".join(lines)
