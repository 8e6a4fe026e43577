"""Pytest fixtures for camel_cards tests."""
import os
import sys

import pytest

# Project root on sys.path so camel_cards imports without installation
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from camel_cards.config import EXAMPLE_HANDS


@pytest.fixture
def example_pairs():
    return list(EXAMPLE_HANDS)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "example.txt"
    path.write_text("".join(f"{labels} {bid}\n" for labels, bid in EXAMPLE_HANDS))
    return path
