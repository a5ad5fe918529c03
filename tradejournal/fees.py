"""Per-trade contract count and commission."""

import math

from .config import JournalConfig
from .numbers import is_finite, parse_number
from .types import Trade

DEFAULT_SYMBOL = "WIN"


def trade_symbol(trade: Trade) -> str:
    return trade.symbol or DEFAULT_SYMBOL


def trade_contracts(trade: Trade) -> int:
    """Contracts as a positive integer; unparsable input counts as 1."""
    c = parse_number(trade.contracts)
    if not is_finite(c):
        return 1
    return max(1, math.floor(c))


def trade_fee(trade: Trade, config: JournalConfig) -> float:
    """
    Commission charged for *trade*.

    A finite ``fee_override`` (kept for records written before costs moved
    into the config) is returned as-is, without contract multiplication.
    Otherwise: contracts x cost per operation for the symbol (0 if unknown).
    """
    override = parse_number(trade.fee_override)
    if is_finite(override):
        return override
    return trade_contracts(trade) * config.cost_per_op(trade_symbol(trade))
