"""
Rank model for the 13 card labels.
Cards are integers 0-12 indexing LABELS ("2" = 0 .. "A" = 12).
In wildcard mode J drops below 2; every other label keeps its relative order.
"""

from camel_cards.config import LABELS, NUM_LABELS, JOKER_INDEX
from camel_cards.errors import InvalidLabelError

_LABEL_TO_INDEX = {label: i for i, label in enumerate(LABELS)}

# Ordinal tables indexed by card: standard is the identity, wildcard moves J to 0
_STANDARD_ORDINALS = tuple(range(NUM_LABELS))
_WILDCARD_ORDINALS = tuple(
    0 if i == JOKER_INDEX else (i + 1 if i < JOKER_INDEX else i)
    for i in range(NUM_LABELS)
)


def label_index(label):
    try:
        return _LABEL_TO_INDEX[label]
    except (KeyError, TypeError):
        raise InvalidLabelError(f"Invalid card label: {label!r}") from None


def parse_labels(text):
    """'KTJJT' -> (11, 8, 9, 9, 8)."""
    return tuple(label_index(ch) for ch in text)


def format_cards(cards):
    return "".join(LABELS[c] for c in cards)


def _as_index(card):
    if isinstance(card, str):
        return label_index(card)
    if isinstance(card, bool) or not isinstance(card, int) or not 0 <= card < NUM_LABELS:
        raise InvalidLabelError(f"Invalid card: {card!r}")
    return card


def ordinal(card, wildcard=False):
    """
    Strength of a single card (label character or index) under the given mode.
    Returns 0..12; strictly increasing with strength and injective per mode.
    """
    table = _WILDCARD_ORDINALS if wildcard else _STANDARD_ORDINALS
    return table[_as_index(card)]


def ordinals(cards, wildcard=False):
    """Per-position ordinals, used for left-to-right tie-breaking."""
    return tuple(ordinal(c, wildcard) for c in cards)
