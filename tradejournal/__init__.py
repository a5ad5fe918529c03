# tradejournal/__init__.py
"""
Tradejournal - day-trading journal statistics engine.
Copyright 2026 Tradejournal contributors.

Turns a log of trades plus a normalised config into fees, net P&L, an
equity curve, daily buckets, performance ratios and a daily risk status.
"""

from .config import DEFAULT_CONFIG_TEXT, JournalConfig
from .dashboard import DashboardSummary, TradeRow, build_summary, history_rows
from .equity import equity_before, equity_curve, sort_trades, total_equity
from .filters import TradeFilter, filter_trades, tags_list
from .numbers import parse_number
from .risk import DailyRiskState, evaluate_daily_risk
from .types import DailyBucket, EquityPoint, Pnl, Points, RiskStatus, Trade

__version__ = "0.5.0"

__all__ = [
    "__version__",
    "DEFAULT_CONFIG_TEXT",
    "DailyBucket",
    "DailyRiskState",
    "DashboardSummary",
    "EquityPoint",
    "JournalConfig",
    "Pnl",
    "Points",
    "RiskStatus",
    "Trade",
    "TradeFilter",
    "TradeRow",
    "build_summary",
    "equity_before",
    "equity_curve",
    "evaluate_daily_risk",
    "filter_trades",
    "history_rows",
    "parse_number",
    "sort_trades",
    "tags_list",
    "total_equity",
]
