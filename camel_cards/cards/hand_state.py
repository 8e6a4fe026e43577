"""
Immutable hand: original labels, bid, and the category derived for one mode.
"""

from collections import namedtuple

from tqdm import tqdm

from camel_cards.config import HAND_SIZE, JOKER_INDEX, PROGRESS_DESC
from camel_cards.cards.ranks import parse_labels
from camel_cards.errors import MalformedLineError, InvalidLabelError
from camel_cards.eval.hand_eval import classify_counts, count_labels, resolve_wildcards


# cards: label indices as given; resolved: jokers merged (== cards in standard mode)
Hand = namedtuple("Hand", ["labels", "cards", "bid", "wildcard", "resolved", "category"])


def make_hand(labels, bid, wildcard=False):
    """
    Build a fully classified Hand. labels is a 5-character string (or an
    iterable of label characters); bid must be a non-negative int.
    """
    if not isinstance(labels, str):
        labels = tuple(labels)
        if len(labels) != HAND_SIZE:
            raise MalformedLineError(f"Hand {labels!r} has {len(labels)} cards, expected {HAND_SIZE}")
        for label in labels:
            if not isinstance(label, str) or len(label) != 1:
                raise InvalidLabelError(f"Invalid card label: {label!r}")
        labels = "".join(labels)
    elif len(labels) != HAND_SIZE:
        raise MalformedLineError(f"Hand {labels!r} has {len(labels)} cards, expected {HAND_SIZE}")
    if isinstance(bid, bool) or not isinstance(bid, int) or bid < 0:
        raise MalformedLineError(f"Bid for {labels} must be a non-negative integer, got {bid!r}")

    cards = parse_labels(labels)
    counts = count_labels(cards)
    resolved = cards
    if wildcard:
        target, counts = resolve_wildcards(counts)
        resolved = tuple(target if c == JOKER_INDEX else c for c in cards)
    category = classify_counts(counts)
    return Hand(labels, cards, bid, bool(wildcard), resolved, category)


def make_hands(pairs, wildcard=False, progress=False):
    """Build one Hand per (labels, bid) pair, in input order."""
    pairs = list(pairs)
    return [
        make_hand(labels, bid, wildcard)
        for labels, bid in tqdm(pairs, desc=PROGRESS_DESC, disable=not progress)
    ]
