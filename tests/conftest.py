import random
import sys
from pathlib import Path

import pytest

# Make the top-level packages (engine, interface, web, tools) importable
# when running pytest from a plain checkout.
REPO_ROOT = Path(__file__).resolve().parent.parent
if REPO_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, REPO_ROOT.as_posix())


def parse_board(text: str) -> list:
    """Build a board from a 9-character string: X, O, or '.' for empty."""
    return [None if ch == "." else ch for ch in text.replace(" ", "")]


@pytest.fixture
def rng():
    """Seeded random source for deterministic advisor tie-breaks."""
    return random.Random(1234)
