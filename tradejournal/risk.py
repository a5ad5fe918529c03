"""Daily risk gating."""

from dataclasses import dataclass
from typing import Iterable

from .config import JournalConfig
from .equity import equity_before, sort_trades
from .pnl import trade_net
from .time_utils import today_iso
from .types import RiskStatus, Trade


@dataclass(frozen=True)
class DailyRiskState:
    status: RiskStatus
    today_net: float
    today_pct: float
    trade_count: int
    start_equity: float  # capital before today's first trade

    @property
    def blocked(self) -> bool:
        return self.status is not RiskStatus.NORMAL


def classify_day(
    *,
    today_pct: float,
    trade_count: int,
    stop_daily_pct: float,
    target_daily_pct: float,
    max_trades_per_day: int,
) -> RiskStatus:
    """
    Classify a trading day. First match wins:

      1. no trades            -> NORMAL
      2. pct <= stop          -> STOP
      3. pct >= target        -> META
      4. count >= max trades  -> LIMITE
      5. otherwise            -> NORMAL

    STOP and META therefore outrank LIMITE when both apply.
    """
    if trade_count <= 0:
        return RiskStatus.NORMAL
    if today_pct <= stop_daily_pct:
        return RiskStatus.STOP
    if today_pct >= target_daily_pct:
        return RiskStatus.META
    if trade_count >= max_trades_per_day:
        return RiskStatus.LIMITE
    return RiskStatus.NORMAL


def evaluate_daily_risk(
    trades: Iterable[Trade],
    config: JournalConfig,
    today: str | None = None,
) -> DailyRiskState:
    """Derive today's risk state from the full, unfiltered trade log.

    Recomputed from scratch on every call; there is no carried-over state.
    """
    day = today or today_iso()
    trades = list(trades)
    todays = [t for t in sort_trades(trades) if t.date == day]

    start = equity_before(day, trades, config)
    net = sum(trade_net(t, config) for t in todays)
    pct = (net / start) if start > 0 else 0.0

    status = classify_day(
        today_pct=pct,
        trade_count=len(todays),
        stop_daily_pct=config.stop_daily_pct,
        target_daily_pct=config.target_daily_pct,
        max_trades_per_day=config.max_trades_per_day,
    )
    return DailyRiskState(
        status=status,
        today_net=float(net),
        today_pct=float(pct),
        trade_count=len(todays),
        start_equity=float(start),
    )


def risk_per_trade_amount(config: JournalConfig) -> float:
    """Approximate money at risk per trade: capital x risk-per-trade fraction."""
    return float(config.capital_initial) * float(config.risk_per_trade_pct)
