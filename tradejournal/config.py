from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from .numbers import is_finite, parse_number

log = logging.getLogger(__name__)

# Operator-facing defaults, stored as text exactly as typed into the form.
DEFAULT_CONFIG_TEXT: dict[str, str] = {
    "capitalInitial": "50000",
    "maxTradesPerDay": "3",
    "stopDailyPct": "-0,01",
    "targetDailyPct": "0,01",
    "riskPerTradePct": "0,0025",
    "winPointValue": "0,2",
    "wdoPointValue": "10",
    "winCostPerOp": "0,25",
    "wdoCostPerOp": "1,20",
}


@dataclass(frozen=True)
class JournalConfig:
    """Normalised, numeric journal settings.

    Built directly, the symbol maps start empty, so every symbol has zero
    point value and zero cost until given. :meth:`from_text` instead starts
    from :data:`DEFAULT_CONFIG_TEXT`, which prices WIN and WDO.
    """
    capital_initial: float = 0.0
    max_trades_per_day: int = 3
    stop_daily_pct: float = -0.01
    target_daily_pct: float = 0.01
    risk_per_trade_pct: float = 0.0025
    point_value_by_symbol: Mapping[str, float] = field(default_factory=dict, hash=False)
    cost_per_op_by_symbol: Mapping[str, float] = field(default_factory=dict, hash=False)

    def point_value(self, symbol: str) -> float:
        v = self.point_value_by_symbol.get(symbol, 0.0)
        return float(v) if is_finite(v) else 0.0

    def cost_per_op(self, symbol: str) -> float:
        v = self.cost_per_op_by_symbol.get(symbol, 0.0)
        return float(v) if is_finite(v) else 0.0

    @classmethod
    def from_text(cls, raw: Mapping[str, Any] | None = None) -> JournalConfig:
        """Normalise operator-entered config text.

        *raw* is merged over :data:`DEFAULT_CONFIG_TEXT`. Every field that
        fails to parse falls back to its default value instead of raising.
        """
        text = {**DEFAULT_CONFIG_TEXT, **(raw or {})}

        def num(key: str, fallback: float) -> float:
            n = parse_number(text.get(key))
            if not is_finite(n):
                log.debug("Config %s=%r not numeric, using %s", key, text.get(key), fallback)
                return fallback
            return n

        max_trades = num("maxTradesPerDay", 3)

        return cls(
            capital_initial=num("capitalInitial", 0.0),
            max_trades_per_day=max(1, math.floor(max_trades)),
            stop_daily_pct=num("stopDailyPct", -0.01),
            target_daily_pct=num("targetDailyPct", 0.01),
            risk_per_trade_pct=num("riskPerTradePct", 0.0025),
            point_value_by_symbol={
                "WIN": num("winPointValue", 0.2),
                "WDO": num("wdoPointValue", 10.0),
            },
            cost_per_op_by_symbol={
                "WIN": num("winCostPerOp", 0.25),
                "WDO": num("wdoCostPerOp", 1.2),
            },
        )
