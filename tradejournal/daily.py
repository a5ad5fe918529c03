"""Per-calendar-day P&L buckets."""

from collections import defaultdict
from typing import Iterable

from .config import JournalConfig
from .equity import sort_trades
from .pnl import trade_net
from .types import DailyBucket, Trade


def daily_buckets(trades: Iterable[Trade], config: JournalConfig) -> list[DailyBucket]:
    """Sum net P&L and count trades per date, ascending by date."""
    pnl: dict[str, float] = defaultdict(float)
    count: dict[str, int] = defaultdict(int)

    # Accumulate in chronological order so float sums do not depend on input order.
    for t in sort_trades(trades):
        d = t.date or ""
        pnl[d] += trade_net(t, config)
        count[d] += 1

    return [DailyBucket(date=d, pnl=pnl[d], trades=count[d]) for d in sorted(pnl)]
