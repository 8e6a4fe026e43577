"""
Central configuration: card labels, hand shape, tie policy, example data.
"""

# Card labels, weakest to strongest in standard mode
LABELS = "23456789TJQKA"
NUM_LABELS = len(LABELS)  # 13
JOKER = "J"
JOKER_INDEX = LABELS.index(JOKER)  # 9

# Hand shape
HAND_SIZE = 5
NUM_CATEGORIES = 7

# Rule variants
MODES = ("standard", "wildcard")

# Full positional ties: "error" raises, "stable" keeps input order
TIE_POLICIES = ("error", "stable")
DEFAULT_TIE_POLICY = "error"

# CLI / output
DEFAULT_INPUT_FILE = "input.txt"
PROGRESS_DESC = "Classifying hands..."

# Worked example (five hands)
EXAMPLE_HANDS = [
    ("32T3K", 765),
    ("T55J5", 684),
    ("KK677", 28),
    ("KTJJT", 220),
    ("QQQJA", 483),
]
EXAMPLE_STANDARD_TOTAL = 6440
EXAMPLE_WILDCARD_TOTAL = 5905
