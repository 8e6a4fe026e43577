"""
Main entry point.

Usage:
    python main.py example              # Check the five-hand example (6440 / 5905)
    python main.py standard [file]      # Standard rules total
    python main.py wildcard [file]      # Jokers-wild total
"""

import sys

from camel_cards.config import (
    DEFAULT_INPUT_FILE,
    EXAMPLE_HANDS,
    EXAMPLE_STANDARD_TOTAL,
    EXAMPLE_WILDCARD_TOTAL,
)


def run_example():
    """Score the built-in example under both rule sets and check the totals."""
    from camel_cards.scoring import score_both

    standard, wildcard = score_both(EXAMPLE_HANDS)
    print(f"Standard: {standard} (expected {EXAMPLE_STANDARD_TOTAL})")
    print(f"Wildcard: {wildcard} (expected {EXAMPLE_WILDCARD_TOTAL})")
    if (standard, wildcard) != (EXAMPLE_STANDARD_TOTAL, EXAMPLE_WILDCARD_TOTAL):
        print("Example check FAILED")
        return 1
    print("Example check passed")
    return 0


def run_file(wildcard):
    from camel_cards.cards import load_hands
    from camel_cards.errors import CamelCardsError
    from camel_cards.scoring import score

    path = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_INPUT_FILE
    try:
        total = score(load_hands(path), wildcard=wildcard)
    except (OSError, CamelCardsError) as e:
        print(f"Error: {e}")
        return 1
    label = "Wildcard" if wildcard else "Standard"
    print(f"{label} total: {total}")
    return 0


if __name__ == "__main__":
    mode = sys.argv[1] if len(sys.argv) > 1 else "example"

    modes = {
        "example": run_example,
        "standard": lambda: run_file(False),
        "wildcard": lambda: run_file(True),
    }

    if mode in modes:
        sys.exit(modes[mode]())
    else:
        print(f"Unknown mode: {mode}")
        print(f"Available: {', '.join(modes.keys())}")
        sys.exit(1)
