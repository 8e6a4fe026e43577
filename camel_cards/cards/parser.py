"""
Line parsing: "<5 labels> <bid>" -> (labels, bid).
"""

from camel_cards.config import HAND_SIZE
from camel_cards.cards.ranks import parse_labels
from camel_cards.errors import MalformedLineError, InvalidLabelError


def parse_line(line, line_no=None):
    where = f"line {line_no}: " if line_no is not None else ""
    fields = line.split()
    if len(fields) != 2:
        raise MalformedLineError(f"{where}expected '<hand> <bid>', got {line.strip()!r}")
    labels, raw_bid = fields
    if len(labels) != HAND_SIZE:
        raise MalformedLineError(f"{where}hand {labels!r} must have {HAND_SIZE} cards")
    try:
        parse_labels(labels)
    except InvalidLabelError as e:
        raise InvalidLabelError(f"{where}{e}") from None
    if not (raw_bid.isascii() and raw_bid.isdigit()):
        raise MalformedLineError(f"{where}bid {raw_bid!r} is not a non-negative integer")
    return labels, int(raw_bid)


def parse_lines(lines):
    """Parse every non-blank line; line numbers are 1-based."""
    pairs = []
    for i, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        pairs.append(parse_line(line, i))
    return pairs


def load_hands(path):
    with open(path) as f:
        return parse_lines(f)
