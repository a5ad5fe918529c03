"""Performance statistics for a (filtered) set of journal trades."""

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .config import JournalConfig
from .equity import sort_trades
from .pnl import trade_net
from .types import EquityPoint, Trade


__all__ = [
    "TradeStats",
    "compute_stats",
    "max_drawdown",
]


@dataclass(frozen=True)
class TradeStats:
    """Performance statistics for a trade window."""
    trades: int
    wins: int
    losses: int
    win_rate: float
    avg_win: float
    avg_loss: float
    expectancy: float
    max_drawdown: float
    start_equity: float
    end_equity: float
    period_pnl: float
    period_pct: float


def max_drawdown(equity: Sequence[float]) -> float:
    """Largest fractional decline from a running equity peak.

    Returns a value <= 0 (e.g. -0.05 for a 5% drawdown). Points where the
    peak so far is not positive contribute 0.
    """
    eq = np.asarray(equity, dtype=np.float64)
    if eq.size == 0:
        return 0.0

    peaks = np.maximum.accumulate(eq)
    with np.errstate(divide="ignore", invalid="ignore"):
        dd = np.where(peaks > 0, (eq - peaks) / peaks, 0.0)
    return float(min(dd.min(), 0.0))


def compute_stats(
    trades: Iterable[Trade],
    config: JournalConfig,
    curve: Sequence[EquityPoint],
    *,
    start_equity: float,
) -> TradeStats:
    """
    Compute statistics for *trades* and their equity *curve*.

    Args:
        trades: The filtered trades the curve was built from
        config: Normalised journal config
        curve: Equity points seeded from *start_equity*
        start_equity: Capital immediately before the window

    Returns:
        TradeStats; every ratio is 0 rather than NaN on an empty window
    """
    pnls = [trade_net(t, config) for t in sort_trades(trades)]
    wins = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p < 0]

    n = len(pnls)
    wins_n = len(wins)
    losses_n = len(losses)

    avg_win = (sum(wins) / wins_n) if wins_n else 0.0
    avg_loss = (sum(losses) / losses_n) if losses_n else 0.0  # negative
    win_rate = (wins_n / n) if n else 0.0
    expectancy = (win_rate * avg_win + (1.0 - win_rate) * avg_loss) if n else 0.0

    start = float(start_equity)
    end = curve[-1].equity if curve else start
    period_pnl = end - start
    period_pct = (period_pnl / start) if start > 0 else 0.0

    mdd = max_drawdown([p.equity for p in curve])

    return TradeStats(
        trades=n,
        wins=wins_n,
        losses=losses_n,
        win_rate=win_rate,
        avg_win=float(avg_win),
        avg_loss=float(avg_loss),
        expectancy=float(expectancy),
        max_drawdown=mdd,
        start_equity=start,
        end_equity=float(end),
        period_pnl=float(period_pnl),
        period_pct=float(period_pct),
    )
