"""Dashboard summary and history-table rows.

This is the read side handed to rendering and export code. Both functions
are pure: they take a snapshot of the log and config and return new records.
"""

from dataclasses import dataclass
from typing import Iterable

from .config import JournalConfig
from .daily import daily_buckets
from .equity import equity_before, equity_curve, sort_trades, total_equity
from .fees import trade_contracts, trade_fee
from .filters import TradeFilter, filter_trades
from .metrics import compute_stats
from .pnl import trade_gross
from .risk import DailyRiskState, evaluate_daily_risk
from .types import DailyBucket, EquityPoint, RiskStatus, Trade

__all__ = [
    "DashboardSummary",
    "TradeRow",
    "build_summary",
    "history_rows",
]


@dataclass(frozen=True)
class TradeRow:
    trade: Trade
    contracts: int
    fee: float
    gross: float
    net: float


@dataclass(frozen=True)
class DashboardSummary:
    capital_initial: float
    capital_current: float
    period_start: str | None
    period_end: str | None
    period_start_capital: float
    period_end_capital: float
    period_pnl: float
    period_pct: float
    n_trades: int
    win_rate: float
    expectancy: float
    max_drawdown: float
    equity: tuple[EquityPoint, ...]
    daily: tuple[DailyBucket, ...]
    risk: DailyRiskState

    @property
    def status(self) -> RiskStatus:
        return self.risk.status

    @property
    def blocked(self) -> bool:
        return self.risk.blocked

    @property
    def today_net(self) -> float:
        return self.risk.today_net

    @property
    def today_pct(self) -> float:
        return self.risk.today_pct

    @property
    def today_trade_count(self) -> int:
        return self.risk.trade_count


def history_rows(
    trades: Iterable[Trade],
    config: JournalConfig,
    trade_filter: TradeFilter | None = None,
) -> list[TradeRow]:
    """Per-trade derived values for the history table, in log order."""
    rows: list[TradeRow] = []
    for t in filter_trades(trades, trade_filter):
        gross = trade_gross(t, config)
        fee = trade_fee(t, config)
        rows.append(
            TradeRow(trade=t, contracts=trade_contracts(t), fee=fee, gross=gross, net=gross - fee)
        )
    return rows


def build_summary(
    trades: Iterable[Trade],
    config: JournalConfig,
    *,
    trade_filter: TradeFilter | None = None,
    today: str | None = None,
) -> DashboardSummary:
    """
    Build the dashboard for the trades selected by *trade_filter*.

    Current capital and today's risk state always use the whole log; the
    period figures, curve, daily buckets and ratios use the filtered window.
    The curve starts from the capital just before the window's first date.
    """
    trades = list(trades)
    capital_current = total_equity(trades, config)

    window = sort_trades(filter_trades(trades, trade_filter))
    if window:
        period_start: str | None = window[0].date
        period_end: str | None = window[-1].date
        start_capital = equity_before(window[0].date, trades, config)
    else:
        period_start = period_end = None
        start_capital = capital_current

    curve = equity_curve(window, config, start_capital)
    stats = compute_stats(window, config, curve, start_equity=start_capital)

    return DashboardSummary(
        capital_initial=float(config.capital_initial),
        capital_current=float(capital_current),
        period_start=period_start,
        period_end=period_end,
        period_start_capital=stats.start_equity,
        period_end_capital=stats.end_equity,
        period_pnl=stats.period_pnl,
        period_pct=stats.period_pct,
        n_trades=stats.trades,
        win_rate=stats.win_rate,
        expectancy=stats.expectancy,
        max_drawdown=stats.max_drawdown,
        equity=tuple(curve),
        daily=tuple(daily_buckets(window, config)),
        risk=evaluate_daily_risk(trades, config, today),
    )
