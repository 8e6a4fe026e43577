"""
Five-card hand classifier with optional joker resolution.
Cards are integers 0-12 (see camel_cards.cards.ranks).
Categories are ints 0..6; higher = stronger.
"""

import numpy as np

from camel_cards.config import NUM_LABELS, JOKER_INDEX, HAND_SIZE
from camel_cards.errors import InvariantViolation

HIGH_CARD = 0
PAIR = 1
TWO_PAIR = 2
THREE_OF_A_KIND = 3
FULL_HOUSE = 4
FOUR_OF_A_KIND = 5
FIVE_OF_A_KIND = 6

CATEGORY_NAMES = (
    "HighCard",
    "Pair",
    "TwoPair",
    "ThreeOfAKind",
    "FullHouse",
    "FourOfAKind",
    "FiveOfAKind",
)

# Sorted (descending) count multiset -> category
_SHAPES = {
    (5,): FIVE_OF_A_KIND,
    (4, 1): FOUR_OF_A_KIND,
    (3, 2): FULL_HOUSE,
    (3, 1, 1): THREE_OF_A_KIND,
    (2, 2, 1): TWO_PAIR,
    (2, 1, 1, 1): PAIR,
    (1, 1, 1, 1, 1): HIGH_CARD,
}


def category_name(category):
    return CATEGORY_NAMES[category]


def count_labels(cards):
    """Occurrences per label as a length-13 int array."""
    return np.bincount(np.asarray(cards, dtype=np.int64), minlength=NUM_LABELS)


def resolve_wildcards(counts):
    """
    Merge all jokers into the most frequent non-joker label.
    Ties between non-joker labels go to the lowest label index; the category
    is the same whichever is picked. Five jokers merge into "2" as a placeholder.
    Returns (target, resolved_counts); resolved_counts has no joker entry.
    """
    counts = np.asarray(counts, dtype=np.int64)
    others = counts.copy()
    others[JOKER_INDEX] = 0
    target = int(np.argmax(others))
    resolved = others
    resolved[target] += counts[JOKER_INDEX]
    return target, resolved


def resolve_cards(cards):
    """Cards with every joker replaced by the resolved target label."""
    target, _ = resolve_wildcards(count_labels(cards))
    return tuple(target if c == JOKER_INDEX else c for c in cards)


def classify_counts(counts):
    """Category from per-label counts summing to HAND_SIZE."""
    counts = np.asarray(counts)
    if counts.sum() != HAND_SIZE:
        raise InvariantViolation(f"Label counts sum to {counts.sum()}, expected {HAND_SIZE}")
    shape = tuple(sorted((int(n) for n in counts if n > 0), reverse=True))
    try:
        return _SHAPES[shape]
    except KeyError:
        raise InvariantViolation(f"Unclassifiable count shape: {shape}") from None


def classify_hand(cards, wildcard=False):
    counts = count_labels(cards)
    if wildcard:
        _, counts = resolve_wildcards(counts)
    return classify_counts(counts)


def cards_by_count(cards):
    """Most frequent label first, equal counts by stronger label (display only)."""
    counts = count_labels(cards)
    return tuple(sorted(cards, key=lambda c: (counts[c], c), reverse=True))
