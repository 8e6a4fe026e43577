"""
Cards: rank model, hand construction, input parsing.
"""

from camel_cards.cards.ranks import (
    label_index,
    parse_labels,
    format_cards,
    ordinal,
    ordinals,
)
from camel_cards.cards.hand_state import Hand, make_hand, make_hands
from camel_cards.cards.parser import parse_line, parse_lines, load_hands

__all__ = [
    "label_index",
    "parse_labels",
    "format_cards",
    "ordinal",
    "ordinals",
    "Hand",
    "make_hand",
    "make_hands",
    "parse_line",
    "parse_lines",
    "load_hands",
]
