# tests/conftest.py
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tradejournal.config import JournalConfig
from tradejournal.types import Pnl, Points, Trade


@pytest.fixture
def config():
    """Defaults of the journal form: 50k capital, WIN 0.2/pt, 0.25 per op."""
    return JournalConfig.from_text()


@pytest.fixture
def make_trade():
    """Factory for trades with sensible defaults."""
    counter = {"n": 0}

    def _make(*, points=None, pnl=None, **overrides):
        counter["n"] += 1
        if points is not None:
            mode = Points(points)
        else:
            mode = Pnl(pnl if pnl is not None else "0")
        defaults = dict(
            id=f"t{counter['n']}",
            date="2025-03-10",
            mode=mode,
            symbol="WIN",
            contracts="1",
            tag="",
            created_at=counter["n"],
        )
        defaults.update(overrides)
        return Trade(**defaults)

    return _make
