"""History filters over the trade log."""

from dataclasses import dataclass
from typing import Iterable

from .types import Trade

ALL_TAGS = "ALL"


@dataclass(frozen=True)
class TradeFilter:
    """Narrow the log for tables and dashboards.

    All bounds are optional; ``date_from``/``date_to`` are inclusive.
    A tag of ``None`` or ``"ALL"`` matches every trade.
    """
    date: str | None = None
    tag: str | None = None
    date_from: str | None = None
    date_to: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.date or self.date_from or self.date_to) and self.tag in (None, ALL_TAGS)

    def matches(self, trade: Trade) -> bool:
        d = trade.date or ""
        if self.date and d != self.date:
            return False
        if self.date_from and d < self.date_from:
            return False
        if self.date_to and d > self.date_to:
            return False
        if self.tag not in (None, ALL_TAGS) and (trade.tag or "") != self.tag:
            return False
        return True


def filter_trades(trades: Iterable[Trade], trade_filter: TradeFilter | None = None) -> list[Trade]:
    """Trades matching *trade_filter*, in input order."""
    if trade_filter is None:
        return list(trades)
    return [t for t in trades if trade_filter.matches(t)]


def tags_list(trades: Iterable[Trade]) -> list[str]:
    """Distinct non-empty tags, sorted case-insensitively."""
    return sorted({(t.tag or "").strip() for t in trades} - {""}, key=str.casefold)
