#!/usr/bin/env python3
"""
Score a hands file.
Usage:
  python scripts/score.py input.txt
  python scripts/score.py input.txt --mode wildcard --report
  python scripts/score.py input.txt --ties stable --debug-log logs/ranked.ndjson
"""

import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from camel_cards.cli import main


if __name__ == "__main__":
    sys.exit(main())
