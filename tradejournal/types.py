"""Journal record types."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Points:
    """Result entered as points; converted with the symbol's point value."""
    value: str | float

    kind = "points"


@dataclass(frozen=True)
class Pnl:
    """Result entered directly as money, already sized for all contracts."""
    value: str | float

    kind = "pnl"


TradeMode = Points | Pnl


@dataclass(frozen=True)
class Trade:
    id: str
    date: str           # YYYY-MM-DD
    mode: TradeMode
    symbol: str = "WIN"
    contracts: str = "1"
    tag: str = ""
    fee_override: str | float | None = None  # legacy per-trade fee
    created_at: int = 0  # ms since epoch, same-day tie-break


class RiskStatus(str, Enum):
    """Daily risk classification used to gate further trading."""
    NORMAL = "NORMAL"
    STOP = "STOP"      # daily loss limit hit
    META = "META"      # daily profit target hit
    LIMITE = "LIMITE"  # max trades per day reached


@dataclass(frozen=True)
class EquityPoint:
    index: int
    date: str
    equity: float
    pnl: float


@dataclass(frozen=True)
class DailyBucket:
    date: str
    pnl: float
    trades: int
