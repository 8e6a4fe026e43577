"""
Exception taxonomy. Every error aborts scoring for the whole input.
"""


class CamelCardsError(Exception):
    """Base exception for camel_cards errors."""
    pass


class InvalidLabelError(CamelCardsError):
    """Raised for a character outside the 13 card labels."""
    pass


class MalformedLineError(CamelCardsError):
    """Raised for a wrong field count, wrong hand length or bad bid."""
    pass


class InvariantViolation(CamelCardsError):
    """Raised when an internal invariant breaks (programming defect)."""
    pass


class HandTieError(InvariantViolation):
    """Raised when two hands are identical in category and every position."""
    pass
