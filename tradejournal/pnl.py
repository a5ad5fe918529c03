"""Gross and net profit/loss per trade."""

from .config import JournalConfig
from .fees import trade_contracts, trade_fee, trade_symbol
from .numbers import finite_or, parse_number
from .types import Points, Trade


def trade_gross(trade: Trade, config: JournalConfig) -> float:
    """P&L before fees.

    Points mode scales by point value and contracts; a direct amount is
    taken as already covering every contract.
    """
    if isinstance(trade.mode, Points):
        points = finite_or(parse_number(trade.mode.value), 0.0)
        sym = trade_symbol(trade)
        return points * config.point_value(sym) * trade_contracts(trade)

    return finite_or(parse_number(trade.mode.value), 0.0)


def trade_net(trade: Trade, config: JournalConfig) -> float:
    return trade_gross(trade, config) - trade_fee(trade, config)
