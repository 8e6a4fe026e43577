"""
Scoring: rank hands and sum rank * bid, per mode.
"""

from camel_cards.scoring.winnings import (
    rank_hands,
    ranked_total,
    total_winnings,
    score,
    score_both,
    write_debug_log,
    print_report,
)

__all__ = [
    "rank_hands",
    "ranked_total",
    "total_winnings",
    "score",
    "score_both",
    "write_debug_log",
    "print_report",
]
