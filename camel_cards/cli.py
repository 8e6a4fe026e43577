"""
Command-line scoring of a hands file under the standard and/or wildcard rules.
"""

import os
import sys
import argparse

from camel_cards.config import DEFAULT_INPUT_FILE, MODES, TIE_POLICIES, DEFAULT_TIE_POLICY
from camel_cards.cards import load_hands, make_hands
from camel_cards.errors import CamelCardsError
from camel_cards.scoring import rank_hands, ranked_total, print_report, write_debug_log


def run_mode(pairs, wildcard, args):
    """Score one mode; optional report and debug log. Returns the total."""
    hands = make_hands(pairs, wildcard=wildcard, progress=args.progress)
    ranked = rank_hands(hands, tie_policy=args.ties)
    label = "Wildcard" if wildcard else "Standard"
    if args.report:
        print_report(ranked, f"{label} rules ({len(ranked)} hands)")
    if args.debug_log:
        write_debug_log(args.debug_log, ranked)
    total = ranked_total(ranked)
    print(f"{label} total: {total}")
    return total


def main(argv=None):
    ap = argparse.ArgumentParser(description="Total winnings for a list of '<hand> <bid>' lines")
    ap.add_argument("input", nargs="?", default=DEFAULT_INPUT_FILE, help="Hands file")
    ap.add_argument("--mode", "-m", choices=list(MODES) + ["both"], default="both")
    ap.add_argument("--ties", choices=TIE_POLICIES, default=DEFAULT_TIE_POLICY,
                    help="Identical hands: 'error' aborts, 'stable' keeps input order")
    ap.add_argument("--report", action="store_true", help="Print the ranked hands table")
    ap.add_argument("--debug-log", default=None, metavar="PATH", help="Append NDJSON per ranked hand")
    ap.add_argument("--progress", action="store_true", help="Show a progress bar while classifying")
    args = ap.parse_args(argv)

    if not os.path.isfile(args.input):
        print(f"Input file not found: {args.input}")
        return 1

    try:
        pairs = load_hands(args.input)
        if args.mode in ("standard", "both"):
            run_mode(pairs, False, args)
        if args.mode in ("wildcard", "both"):
            run_mode(pairs, True, args)
    except CamelCardsError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
