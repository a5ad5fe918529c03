"""Editing operations on a trade-log snapshot.

The log is a tuple; every operation returns a new tuple and leaves its input
untouched. Newest trades go first, matching the order the history table
shows them in.
"""

import logging
import random
from dataclasses import replace
from typing import Any, Iterable

from tradejournal.numbers import is_finite, parse_number
from tradejournal.time_utils import now_ms, to_iso_date
from tradejournal.types import Pnl, Points, Trade, TradeMode

log = logging.getLogger(__name__)


def _require_numeric(mode: TradeMode) -> None:
    if not is_finite(parse_number(mode.value)):
        raise ValueError(f"{mode.kind} value {mode.value!r} is not numeric")


def make_mode(kind: str, value: Any) -> TradeMode:
    """Build a mode variant from its ``"points"``/``"pnl"`` name."""
    if kind == Points.kind:
        return Points(value)
    if kind == Pnl.kind:
        return Pnl(value)
    raise ValueError(f"Unknown trade mode: {kind!r}")


def new_trade(
    *,
    date: str | None,
    mode: TradeMode,
    symbol: str = "WIN",
    contracts: str = "1",
    tag: str = "",
    created_at: int | None = None,
) -> Trade:
    """Create a trade with a fresh id, as entered on the trade form."""
    _require_numeric(mode)
    ts = now_ms() if created_at is None else created_at
    return Trade(
        id=f"t_{ts}_{random.randrange(10**9)}",
        date=to_iso_date(date),
        mode=mode,
        symbol=symbol,
        contracts=str(contracts),
        tag=(tag or "").strip(),
        created_at=ts,
    )


def add_trade(trades: Iterable[Trade], trade: Trade) -> tuple[Trade, ...]:
    return (trade, *trades)


def update_trade(trades: Iterable[Trade], trade_id: str, **changes: Any) -> tuple[Trade, ...]:
    """Replace fields of the trade with *trade_id*.

    Switching ``mode`` swaps the whole variant, so the previous monetary
    value is dropped rather than kept alongside the new one.
    """
    trades = tuple(trades)
    if not any(t.id == trade_id for t in trades):
        raise KeyError(trade_id)

    if "mode" in changes:
        _require_numeric(changes["mode"])
    if "tag" in changes:
        changes["tag"] = (changes["tag"] or "").strip()
    if "contracts" in changes:
        changes["contracts"] = str(changes["contracts"])
    if "date" in changes:
        changes["date"] = to_iso_date(changes["date"])

    return tuple(replace(t, **changes) if t.id == trade_id else t for t in trades)


def delete_trade(trades: Iterable[Trade], trade_id: str) -> tuple[Trade, ...]:
    return tuple(t for t in trades if t.id != trade_id)


def delete_day(trades: Iterable[Trade], day: str | None = None) -> tuple[Trade, ...]:
    """Drop every trade dated exactly *day* (default: today)."""
    day = to_iso_date(day)
    trades = tuple(trades)
    kept = tuple(t for t in trades if t.date != day)
    log.info("Deleted %d trades for %s", len(trades) - len(kept), day)
    return kept
