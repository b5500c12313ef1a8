"""Natural-language summary of the work completed in a period."""

from typing import List, Mapping, Sequence, Tuple

from ..providers.models import TrelloCard, TrelloLabel

EXAMPLE_CARDS = 3


def completed_cards_by_label(
    completed_cards: Sequence[TrelloCard],
    labels: Sequence[TrelloLabel],
    cards_by_label: Mapping[str, Sequence[TrelloCard]],
) -> List[Tuple[TrelloLabel, List[TrelloCard]]]:
    """
    Completed cards per named label, in label order.

    Labels without a name and labels without completed cards are skipped.
    """
    completed_ids = {card.id for card in completed_cards}
    grouped = []
    for label in labels:
        if not label.name:
            continue
        label_cards = [
            card for card in cards_by_label.get(label.id, ()) if card.id in completed_ids
        ]
        if label_cards:
            grouped.append((label, label_cards))
    return grouped


def generate_work_summary(
    completed_cards: Sequence[TrelloCard],
    labels: Sequence[TrelloLabel],
    cards_by_label: Mapping[str, Sequence[TrelloCard]],
) -> str:
    """
    Generate a natural language summary of the work done.

    Mentions the completed count, completed counts per named label and up to
    three example cards.
    """
    if not completed_cards:
        return "No work was completed during this period."

    summary = f"During this period, the team completed {len(completed_cards)} cards. "

    label_summaries = [
        f"{len(label_cards)} {label.name} items"
        for label, label_cards in completed_cards_by_label(completed_cards, labels, cards_by_label)
    ]
    if label_summaries:
        summary += "This included " + ", ".join(label_summaries) + ". "

    examples = ", ".join(f'"{card.name}"' for card in completed_cards[:EXAMPLE_CARDS])
    summary += f"Key completed items include: {examples}."

    return summary
