"""Tests for line parsing."""
import pytest

from camel_cards.cards import parse_line, parse_lines, load_hands
from camel_cards.errors import MalformedLineError, InvalidLabelError


def test_parse_line():
    assert parse_line("32T3K 765\n") == ("32T3K", 765)
    assert parse_line("  KK677\t28 ") == ("KK677", 28)


@pytest.mark.parametrize("line", ["32T3K", "32T3K 765 1", "32T3 765", "32T3KK 765",
                                  "32T3K -5", "32T3K 7.5", "32T3K abc"])
def test_malformed(line):
    with pytest.raises(MalformedLineError):
        parse_line(line)


def test_invalid_label_reports_line_number():
    with pytest.raises(InvalidLabelError, match="line 2"):
        parse_lines(["32T3K 765", "32X3K 1"])


def test_blank_lines_skipped():
    assert parse_lines(["32T3K 765", "", "   ", "KK677 28"]) == [("32T3K", 765), ("KK677", 28)]


def test_load_hands(example_file, example_pairs):
    assert load_hands(example_file) == example_pairs
