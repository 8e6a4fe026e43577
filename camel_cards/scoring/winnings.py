"""
Scoring: sort hands weakest first, rank = 1-based position, total = sum(rank * bid).
"""

import json

from camel_cards.config import DEFAULT_TIE_POLICY
from camel_cards.cards.hand_state import make_hands
from camel_cards.cards.ranks import format_cards
from camel_cards.eval.hand_eval import category_name, cards_by_count
from camel_cards.eval.ordering import sort_hands


def rank_hands(hands, tie_policy=DEFAULT_TIE_POLICY):
    """Return [(rank, hand), ...] with rank 1 for the weakest hand."""
    return list(enumerate(sort_hands(hands, tie_policy), start=1))


def ranked_total(ranked):
    """Sum of rank * bid. Python ints, so arbitrarily large bids cannot wrap."""
    return sum(rank * hand.bid for rank, hand in ranked)


def total_winnings(hands, tie_policy=DEFAULT_TIE_POLICY):
    return ranked_total(rank_hands(hands, tie_policy))


def score(pairs, wildcard=False, tie_policy=DEFAULT_TIE_POLICY, progress=False):
    """End-to-end: (labels, bid) pairs -> total winnings for one mode."""
    hands = make_hands(pairs, wildcard=wildcard, progress=progress)
    return total_winnings(hands, tie_policy)


def score_both(pairs, tie_policy=DEFAULT_TIE_POLICY, progress=False):
    """(standard_total, wildcard_total) for the same input."""
    pairs = list(pairs)
    return (
        score(pairs, wildcard=False, tie_policy=tie_policy, progress=progress),
        score(pairs, wildcard=True, tie_policy=tie_policy, progress=progress),
    )


def write_debug_log(path, ranked):
    """Append one NDJSON entry per ranked hand."""
    with open(path, "a") as f:
        for rank, hand in ranked:
            entry = {
                "mode": "wildcard" if hand.wildcard else "standard",
                "rank": rank,
                "hand": hand.labels,
                "resolved": format_cards(hand.resolved),
                "bid": hand.bid,
                "category": category_name(hand.category),
                "winnings": rank * hand.bid,
            }
            f.write(json.dumps(entry) + "\n")


def print_report(ranked, title):
    print("=" * 60)
    print(title)
    print("=" * 60)
    print(f"{'Rank':<6} {'Hand':<8} {'Grouped':<9} {'Category':<14} {'Bid':>6} {'Winnings':>10}")
    print("-" * 60)
    for rank, hand in ranked:
        # resolved == cards in standard mode
        grouped = format_cards(cards_by_count(hand.resolved))
        print(f"{rank:<6} {hand.labels:<8} {grouped:<9} {category_name(hand.category):<14} {hand.bid:>6} {rank * hand.bid:>10}")
    total = ranked_total(ranked)
    print("-" * 60)
    print(f"Total: {total}")
    return total
