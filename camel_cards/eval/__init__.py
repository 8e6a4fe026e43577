"""
Evaluation: joker resolution, category classification, hand ordering.
"""

from camel_cards.eval.hand_eval import (
    HIGH_CARD,
    PAIR,
    TWO_PAIR,
    THREE_OF_A_KIND,
    FULL_HOUSE,
    FOUR_OF_A_KIND,
    FIVE_OF_A_KIND,
    CATEGORY_NAMES,
    category_name,
    count_labels,
    resolve_wildcards,
    resolve_cards,
    classify_counts,
    classify_hand,
    cards_by_count,
)
from camel_cards.eval.ordering import hand_key, compare_hands, sort_hands

__all__ = [
    "HIGH_CARD",
    "PAIR",
    "TWO_PAIR",
    "THREE_OF_A_KIND",
    "FULL_HOUSE",
    "FOUR_OF_A_KIND",
    "FIVE_OF_A_KIND",
    "CATEGORY_NAMES",
    "category_name",
    "count_labels",
    "resolve_wildcards",
    "resolve_cards",
    "classify_counts",
    "classify_hand",
    "cards_by_count",
    "hand_key",
    "compare_hands",
    "sort_hands",
]
