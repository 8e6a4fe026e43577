"""
Hand ordering: category first, then original cards left to right by ordinal.
"""

from camel_cards.config import TIE_POLICIES, DEFAULT_TIE_POLICY
from camel_cards.cards.ranks import ordinals
from camel_cards.errors import HandTieError


def hand_key(hand):
    """(category, ordinal_0, ..., ordinal_4); jokers read as their original label."""
    return (hand.category,) + ordinals(hand.cards, hand.wildcard)


def compare_hands(a, b):
    """-1 if a is weaker, 1 if stronger. Identical hands raise HandTieError."""
    if a.wildcard != b.wildcard:
        raise ValueError("Cannot compare hands built under different modes")
    key_a, key_b = hand_key(a), hand_key(b)
    if key_a == key_b:
        raise HandTieError(f"Hands {a.labels} and {b.labels} tie in every position")
    return -1 if key_a < key_b else 1


def sort_hands(hands, tie_policy=DEFAULT_TIE_POLICY):
    """
    Sort ascending (weakest first). Full ties raise under "error";
    under "stable" tied hands keep their input order.
    """
    if tie_policy not in TIE_POLICIES:
        raise ValueError(f"Unknown tie policy {tie_policy!r}; choose from {TIE_POLICIES}")
    modes = {h.wildcard for h in hands}
    if len(modes) > 1:
        raise ValueError("Cannot sort hands built under different modes")

    ordered = sorted(hands, key=hand_key)
    if tie_policy == "error":
        for prev, cur in zip(ordered, ordered[1:]):
            if hand_key(prev) == hand_key(cur):
                raise HandTieError(f"Hands {prev.labels} and {cur.labels} tie in every position")
    return ordered
