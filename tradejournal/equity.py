"""Capital trajectory over the trade log.

Nothing is cached: every call re-sorts and re-accumulates from the trades
it is given.
"""

from typing import Iterable, Sequence

import numpy as np

from .config import JournalConfig
from .pnl import trade_net
from .types import EquityPoint, Trade

__all__ = [
    "equity_array",
    "equity_before",
    "equity_curve",
    "sort_trades",
    "total_equity",
]


def _sort_key(trade: Trade) -> tuple[str, int]:
    return (trade.date or "", trade.created_at or 0)


def sort_trades(trades: Iterable[Trade]) -> list[Trade]:
    """Chronological order: date, then creation time within a day."""
    return sorted(trades, key=_sort_key)


def total_equity(trades: Iterable[Trade], config: JournalConfig) -> float:
    """Initial capital plus the net of every trade, ignoring any filter."""
    return config.capital_initial + sum(trade_net(t, config) for t in sort_trades(trades))


def equity_before(cutoff: str, trades: Iterable[Trade], config: JournalConfig) -> float:
    """Capital at the start of *cutoff*: initial capital plus all earlier trades."""
    eq = config.capital_initial
    for t in sort_trades(trades):
        if (t.date or "") >= cutoff:
            break
        eq += trade_net(t, config)
    return eq


def equity_curve(
    trades: Iterable[Trade], config: JournalConfig, baseline: float
) -> list[EquityPoint]:
    """Running equity for an (already filtered) trade subset.

    Seeded from *baseline*, the capital just before the subset starts, so a
    narrow window still shows real account values rather than starting at 0.
    """
    eq = float(baseline)
    out: list[EquityPoint] = []
    for i, t in enumerate(sort_trades(trades), start=1):
        pnl = trade_net(t, config)
        eq += pnl
        out.append(EquityPoint(index=i, date=t.date, equity=eq, pnl=pnl))
    return out


def equity_array(curve: Sequence[EquityPoint]) -> np.ndarray:
    return np.array([p.equity for p in curve], dtype=np.float64)
